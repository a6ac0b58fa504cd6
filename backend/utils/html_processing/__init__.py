"""HTML rendering and extraction for spec cards."""

from .renderer import render_document, render_preview
from .extractor import extract_cards, ExtractionResult, NoCardsFound

__all__ = ['render_document', 'render_preview', 'extract_cards', 'ExtractionResult', 'NoCardsFound']
