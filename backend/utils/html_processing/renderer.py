"""Module for rendering spec cards into the canonical HTML document."""

from html import escape
from typing import Iterable, List
import logging

from config.env import settings
from models.card import Card

logger = logging.getLogger(__name__)

# Canonical class names shared with the extractor
CONTAINER_CLASS = "specs-container"
CARD_CLASS = "spec-card"
HEADER_CLASS = "spec-header"
CONTENT_CLASS = "spec-content"

LINE_BREAK = "<br />"

DOCUMENT_STYLES = """
      body {
        font-family: Arial, sans-serif;
        padding: 0 10px 0 10px;
      }

      .specs-container {
        display: grid;
        grid-template-columns: repeat(4, 1fr);
        gap: 2px;
        margin-bottom: 50px;
      }

      .spec-card {
        border: 1px solid rgb(145, 145, 145);
        background-color: #ffffff;
        text-align: center;
        font-size: 14px;
      }

      .spec-header {
        background-color: #f9f9f9;
        padding: 15px;
        font-weight: bold;
        border-bottom: 1px solid rgb(145, 145, 145);
        min-height: 28px;
      }

      .spec-content {
        padding: 15px;
        word-break: break-word;
        white-space: normal;
      }

      .mobile-br,
      .mobile-hyphen {
        display: none;
      }

      @media (max-width: 768px) {
        .specs-container {
          grid-template-columns: repeat(2, 1fr);
        }
        .spec-card {
          font-size: 13px;
        }
        .spec-header,
        .spec-content {
          padding: 10px;
        }
        .mobile-br {
          display: inline;
        }
        .mobile-hyphen::after {
          content: "-";
        }
        .mobile-hyphen {
          display: inline;
        }
      }

      @media (max-width: 480px) {
        .specs-container {
          grid-template-columns: 1fr;
        }
        .spec-card {
          font-size: 12px;
        }
        .spec-header,
        .spec-content {
          padding: 8px;
        }
      }
"""

def _escaped_lines(lines: List[str]) -> List[str]:
    return [escape(line) for line in lines]

def render_card_block(card: Card, indent: str = "  ") -> str:
    """Render one card as a ``spec-card`` block with header and content."""
    header_sep = f"{LINE_BREAK}\n{indent}  "
    content_sep = f"{LINE_BREAK}\n{indent}    "
    title_html = header_sep.join(_escaped_lines(card.title_lines))
    content_html = content_sep.join(_escaped_lines(card.row_lines))
    return (
        f'{indent}<div class="{CARD_CLASS}">\n'
        f'{indent}  <div class="{HEADER_CLASS}">{title_html}</div>\n'
        f'{indent}  <div class="{CONTENT_CLASS}">\n'
        f'{indent}    {content_html}\n'
        f'{indent}  </div>\n'
        f'{indent}</div>'
    )

def render_document(cards: Iterable[Card]) -> str:
    """Render cards as a complete, self-contained HTML document.

    Card text is always escaped, so titles and rows can never inject markup.
    An empty card list still yields a valid document with an empty container.

    Args:
        cards: Cards in display order

    Returns:
        The exported HTML document
    """
    cards = list(cards)
    blocks = "\n".join(render_card_block(card, indent="      ") for card in cards)
    body = f"\n{blocks}\n    " if blocks else ""
    logger.debug(f"Rendering document with {len(cards)} cards")
    return f"""<!DOCTYPE html>
<html lang="{escape(settings.editor.document_language)}">
  <head>
    <meta charset="UTF-8" />
    <meta
      name="viewport"
      content="width=device-width, initial-scale=1.0, maximum-scale=1.0"
    />
    <style>{DOCUMENT_STYLES}    </style>
  </head>
  <body>
    <div class="{CONTAINER_CLASS}">{body}</div>
  </body>
</html>
"""

def render_preview(cards: Iterable[Card]) -> str:
    """Render the compact preview fragment: the card container without a document wrapper."""
    blocks = "".join(
        f'<div class="{CARD_CLASS}">'
        f'<div class="{HEADER_CLASS}">{LINE_BREAK.join(_escaped_lines(card.title_lines))}</div>'
        f'<div class="{CONTENT_CLASS}">{LINE_BREAK.join(_escaped_lines(card.row_lines))}</div>'
        f'</div>'
        for card in cards
    )
    return f'<div class="{CONTAINER_CLASS}">{blocks}</div>'
