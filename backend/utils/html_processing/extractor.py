"""Module for recovering spec cards from arbitrary HTML.

Card blocks are located by an ordered list of matchers, from the exact
markup the renderer emits down to loose "card-like" containers. Inside
each block the header and content are resolved the same way: canonical
classes first, then generic selectors, then the block's structure.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple
from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag
import logging

from config.env import settings
from models.card import Card
from utils.text_processing import collapse_markup_whitespace, join_lines
from .renderer import CARD_CLASS, CONTAINER_CLASS, CONTENT_CLASS, HEADER_CLASS

logger = logging.getLogger(__name__)

PARSER = 'html.parser'

# Tried in order; the first selector matching at least one element wins
GENERIC_BLOCK_SELECTORS = ('.card', '.box', '.item', '.tile', 'article', 'section')
GENERIC_HEADER_SELECTORS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6', '.title', '.header', '.heading', '.label', '.name')
GENERIC_CONTENT_SELECTORS = ('.content', '.body', '.description', '.text', 'p')

NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)
NON_TEXT_PARENTS = ('script', 'style', 'template', 'noscript')

# Elements whose text never runs into the text of their neighbours
BLOCK_ELEMENTS = (
    'address', 'article', 'aside', 'blockquote', 'dd', 'div', 'dl', 'dt', 'figcaption', 'figure',
    'footer', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header', 'li', 'main', 'nav', 'ol', 'p', 'pre',
    'section', 'table', 'td', 'th', 'tr', 'ul',
)

LINE_BREAK = object()
BLOCK_GAP = object()

NO_CARDS_MESSAGE = (
    f'No spec cards found in HTML. Expected a <div class="{CONTAINER_CLASS}"> holding '
    f'<div class="{CARD_CLASS}"> blocks, each with a <div class="{HEADER_CLASS}"> title '
    f'and a <div class="{CONTENT_CLASS}"> body, lines separated by <br />.'
)

class NoCardsFound(ValueError):
    """Raised when no card-like block can be located anywhere in the input."""

    def __init__(self, message: str = NO_CARDS_MESSAGE):
        super().__init__(message)
        self.message = message

@dataclass
class ExtractionResult:
    """Cards recovered from a document, numbered 1..max_id in document order."""
    cards: List[Card]
    max_id: int

BlockMatcher = Callable[[str], List[Tag]]

def match_canonical_document(html_text: str) -> List[Tag]:
    """Canonical card blocks inside the body of a full document."""
    soup = BeautifulSoup(html_text, PARSER)
    scope = soup.body if soup.body is not None else soup
    return scope.select(f'.{CARD_CLASS}')

def match_canonical_fragment(html_text: str) -> List[Tag]:
    """Canonical card blocks anywhere in the text, treated as a bare fragment.

    Picks up pasted snippets that sit outside (or without) a ``<body>``.
    """
    fragment = BeautifulSoup(f'<div>{html_text}</div>', PARSER)
    return fragment.select(f'.{CARD_CLASS}')

def match_generic_containers(html_text: str) -> List[Tag]:
    """Blocks matching the first generic card-like selector that finds anything."""
    soup = BeautifulSoup(html_text, PARSER)
    for selector in GENERIC_BLOCK_SELECTORS:
        blocks = soup.select(selector)
        if blocks:
            logger.info(f"Generic selector '{selector}' matched {len(blocks)} blocks")
            return blocks
    return []

BLOCK_MATCHERS: Sequence[BlockMatcher] = (
    match_canonical_document,
    match_canonical_fragment,
    match_generic_containers,
)

def find_card_blocks(html_text: str, matchers: Sequence[BlockMatcher] = BLOCK_MATCHERS) -> List[Tag]:
    """Run the matchers in order and return the first non-empty result.

    Raises:
        NoCardsFound: If every matcher comes back empty
    """
    for matcher in matchers:
        blocks = matcher(html_text)
        if blocks:
            logger.info(f"{matcher.__name__} found {len(blocks)} card blocks")
            return blocks
        logger.debug(f"{matcher.__name__} found no card blocks")
    raise NoCardsFound()

def _is_text(node) -> bool:
    if not isinstance(node, NavigableString) or isinstance(node, NON_TEXT_STRINGS):
        return False
    return node.parent is None or node.parent.name not in NON_TEXT_PARENTS

def _line_tokens(element: Tag, skip: Optional[Tag] = None) -> Iterator:
    """Yield text strings, LINE_BREAK and BLOCK_GAP markers in document order."""
    for child in element.children:
        if isinstance(child, Tag):
            if child is skip:
                continue
            if child.name == 'br':
                yield LINE_BREAK
                continue
            is_block = child.name in BLOCK_ELEMENTS
            if is_block:
                yield BLOCK_GAP
            yield from _line_tokens(child, skip)
            if is_block:
                yield BLOCK_GAP
        elif _is_text(child):
            yield str(child)

def element_lines(element: Tag, skip: Optional[Tag] = None) -> List[str]:
    """Split an element's text into lines at ``<br>`` tags.

    Newlines in the source are formatting only and never start a new line.
    Text from neighbouring block elements is separated by a space. The
    subtree of ``skip`` is left out when it is nested inside ``element``.
    """
    lines = []
    current = ''
    for token in _line_tokens(element, skip):
        if token is LINE_BREAK:
            lines.append(current)
            current = ''
        elif token is BLOCK_GAP:
            if current and not current[-1].isspace():
                current += ' '
        else:
            current += token
    lines.append(current)

    cleaned = (collapse_markup_whitespace(line) for line in lines)
    return [line for line in cleaned if line]

def _first_match(block: Tag, selectors: Sequence[str], exclude: Optional[Tag] = None) -> Optional[Tag]:
    for selector in selectors:
        for candidate in block.select(selector):
            if exclude is not None and (
                candidate is exclude or any(parent is exclude for parent in candidate.parents)
            ):
                continue
            return candidate
    return None

def _text_lines(block: Tag) -> List[str]:
    parts = []
    for node in block.descendants:
        if isinstance(node, Tag) and node.name == 'br':
            parts.append('\n')
        elif _is_text(node):
            parts.append(str(node))
    text = ''.join(parts)
    return [line.strip() for line in text.split('\n') if line.strip()]

def resolve_header_and_content(block: Tag) -> Optional[Tuple[List[str], List[str]]]:
    """Find the title lines and content lines of one card block.

    Returns:
        (title_lines, content_lines), or None when the block has nothing
        usable and should be skipped
    """
    header = block.select_one(f'.{HEADER_CLASS}')
    content = block.select_one(f'.{CONTENT_CLASS}')

    if header is None:
        header = _first_match(block, GENERIC_HEADER_SELECTORS, exclude=content)
    if content is None:
        content = _first_match(block, GENERIC_CONTENT_SELECTORS, exclude=header)

    if header is not None and content is not None:
        # Either one may wrap the other; each keeps only its own text
        return element_lines(header, skip=content), element_lines(content, skip=header)
    if header is not None or content is not None:
        return None

    # Structural fallback
    children = [child for child in block.find_all(True, recursive=False) if child.name != 'br']
    if len(children) >= 2:
        return element_lines(children[0]), element_lines(children[1])
    if len(children) == 1:
        lines = element_lines(children[0])
        return lines, list(lines)

    lines = _text_lines(block)
    if not lines:
        return None
    if len(lines) == 1:
        return lines, list(lines)
    return lines[:1], lines[1:]

def extract_cards(html_text: str) -> ExtractionResult:
    """Recover an ordered card list from HTML.

    Blocks whose header and content cannot be resolved are skipped. Every
    recovered card gets a fresh id, counting from 1 in document order.

    Args:
        html_text: Exported document, hand-edited variant, or pasted markup

    Returns:
        ExtractionResult with the cards and the highest id assigned

    Raises:
        NoCardsFound: If no card-like block exists in the input at all
    """
    logger.info(f"Starting HTML extraction. Content length: {len(html_text)}")
    blocks = find_card_blocks(html_text)

    cards = []
    for index, block in enumerate(blocks, 1):
        resolved = resolve_header_and_content(block)
        if resolved is None:
            logger.warning(f"Skipping block {index}: no header/content could be resolved")
            continue

        title_lines, content_lines = resolved
        cards.append(Card(
            id=len(cards) + 1,
            title=join_lines(title_lines) if title_lines else settings.editor.untitled_placeholder,
            rows=join_lines(content_lines)
        ))

    logger.info(f"Extracted {len(cards)} of {len(blocks)} card blocks")
    return ExtractionResult(cards=cards, max_id=len(cards))
