"""In-memory card list owned by one editing session."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
import logging

from config.env import settings
from utils.reorder import reorder_cards
from utils.text_processing import split_lines, normalize_stored_text

logger = logging.getLogger(__name__)

@dataclass
class Card:
    """A single spec card: a title and its content rows.

    ``title`` and ``rows`` keep the raw text exactly as authored; the
    normalized line views are derived on demand.
    """
    id: int
    title: str = ""
    rows: str = ""

    @property
    def title_lines(self) -> List[str]:
        return split_lines(self.title)

    @property
    def row_lines(self) -> List[str]:
        return split_lines(self.rows)

    def to_record(self) -> Dict:
        """Convert to the plain record used for storage."""
        return {
            'id': self.id,
            'title': self.title,
            'rows': self.rows
        }

    @classmethod
    def from_record(cls, record: Dict) -> 'Card':
        """Create a Card from a stored record, accepting the legacy list format."""
        return cls(
            id=int(record['id']),
            title=normalize_stored_text(record.get('title')),
            rows=normalize_stored_text(record.get('rows'))
        )

@dataclass
class CardStore:
    """Ordered cards plus the id counter that numbers new cards.

    List order is render order. The counter only moves forward on
    creation; it is reset by ``replace_all`` and ``clear``.
    """
    cards: List[Card] = field(default_factory=list)
    card_id_counter: int = 0

    def __len__(self) -> int:
        return len(self.cards)

    def get(self, card_id: int) -> Optional[Card]:
        return next((card for card in self.cards if card.id == card_id), None)

    def create(self) -> Card:
        """Append a card with the default title and rows."""
        self.card_id_counter += 1
        card = Card(
            id=self.card_id_counter,
            title=settings.editor.default_card_title,
            rows=settings.editor.default_card_rows
        )
        self.cards.append(card)
        logger.info(f"Added card {card.id}; store now holds {len(self.cards)} cards")
        return card

    def remove(self, card_id: int) -> bool:
        """Remove a card. Returns False when no card has that id."""
        remaining = [card for card in self.cards if card.id != card_id]
        removed = len(remaining) != len(self.cards)
        self.cards = remaining
        if removed:
            logger.info(f"Deleted card {card_id}")
        return removed

    def set_title(self, card_id: int, text: str) -> bool:
        card = self.get(card_id)
        if card is None:
            return False
        card.title = text
        return True

    def set_rows(self, card_id: int, text: str) -> bool:
        card = self.get(card_id)
        if card is None:
            return False
        card.rows = text
        return True

    def reorder(self, dragged_id: int, target_id: int, insert_before: bool) -> None:
        self.cards = reorder_cards(self.cards, dragged_id, target_id, insert_before)

    def replace_all(self, cards: Iterable[Card], max_id: int) -> None:
        """Swap in a whole new card list, as done by an HTML import."""
        self.cards = list(cards)
        self.card_id_counter = max(max_id, 0)
        logger.info(f"Replaced store with {len(self.cards)} cards (counter={self.card_id_counter})")

    def clear(self) -> None:
        self.cards = []
        self.card_id_counter = 0

    def to_records(self) -> List[Dict]:
        return [card.to_record() for card in self.cards]

    @classmethod
    def from_records(cls, records: Iterable[Dict], card_id_counter: int) -> 'CardStore':
        cards = [Card.from_record(record) for record in records]
        # A stale counter must never hand out an id that is already taken
        highest_id = max((card.id for card in cards), default=0)
        return cls(cards=cards, card_id_counter=max(int(card_id_counter or 0), highest_id, 0))
