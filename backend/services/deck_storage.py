from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Optional
import logging

from models.card import CardStore
from models.stored_deck import StoredDeck

logger = logging.getLogger(__name__)

class DeckStorageService:
    """Saves and restores a session's cards under a deck name."""

    def __init__(self, db: Session):
        self.db = db

    def _get_deck(self, name: str) -> Optional[StoredDeck]:
        return self.db.query(StoredDeck).filter(StoredDeck.name == name).first()

    def save(self, name: str, store: CardStore) -> StoredDeck:
        """Write the store's cards and counter. The store itself is never modified."""
        try:
            deck = self._get_deck(name)
            if deck is None:
                deck = StoredDeck(name=name)
                self.db.add(deck)

            deck.cards = store.to_records()
            deck.card_id_counter = store.card_id_counter

            self.db.commit()
            self.db.refresh(deck)
            logger.info(f"Saved {len(store)} cards to deck '{name}'")
            return deck
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error saving deck '{name}': {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Error saving data: {str(e)}")

    def load(self, name: str) -> Optional[CardStore]:
        """Restore a stored deck, or None if nothing was saved under that name.

        Legacy records that kept titles or rows as arrays of lines are joined
        into the single-text form. A record that cannot be read loads as an
        empty store.
        """
        deck = self._get_deck(name)
        if deck is None:
            return None

        try:
            store = CardStore.from_records(deck.cards or [], deck.card_id_counter)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error loading deck '{name}': {str(e)}")
            return CardStore()

        logger.info(f"Loaded {len(store)} cards from deck '{name}'")
        return store

    def delete(self, name: str) -> bool:
        deck = self._get_deck(name)
        if deck is None:
            return False

        try:
            self.db.delete(deck)
            self.db.commit()
            logger.info(f"Deleted stored deck '{name}'")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting deck '{name}': {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Error clearing stored data: {str(e)}")
