from .base import Base
from .card import Card, CardStore
from .stored_deck import StoredDeck

__all__ = [
    'Base',
    'Card',
    'CardStore',
    'StoredDeck',
]
