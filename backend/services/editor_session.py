from dataclasses import dataclass, field
from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import Dict, Optional
import logging
import uuid

from config.env import settings
from models.card import Card, CardStore
from services.deck_storage import DeckStorageService
from utils.reorder import insert_before_from_pointer

from api.models.requests.card import EditorSessionCreate, CardUpdate, CardReorder
from api.models.responses.card import CardResponse, EditorSessionResponse

logger = logging.getLogger(__name__)

@dataclass
class EditorSession:
    """One editing session and the card store it owns."""
    session_id: str
    name: str
    store: CardStore = field(default_factory=CardStore)

class SessionManager:
    """Keeps independent editor sessions side by side, keyed by session ID."""

    def __init__(self):
        self._sessions: Dict[str, EditorSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, name: str, store: CardStore) -> EditorSession:
        session = EditorSession(session_id=uuid.uuid4().hex, name=name, store=store)
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> EditorSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Editor session not found")
        return session

    def close(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

session_manager = SessionManager()

def get_session_manager() -> SessionManager:
    return session_manager

def to_card_response(card: Card) -> CardResponse:
    return CardResponse.model_validate(card)

def to_session_response(session: EditorSession) -> EditorSessionResponse:
    return EditorSessionResponse(
        session_id=session.session_id,
        name=session.name,
        card_id_counter=session.store.card_id_counter,
        cards=[to_card_response(card) for card in session.store.cards]
    )

class EditorSessionService:
    def __init__(self, sessions: SessionManager, db: Session):
        self.sessions = sessions
        self.db = db

    def create_session(self, request: EditorSessionCreate) -> EditorSessionResponse:
        """Open a session, restoring its stored deck or seeding a default card."""
        name = request.name or settings.editor.default_deck_name
        store = DeckStorageService(self.db).load(name)
        if store is None:
            store = CardStore()

        if not store.cards and settings.editor.seed_default_card:
            store.create()

        session = self.sessions.open(name, store)
        logger.info(f"Opened session {session.session_id} for deck '{name}' with {len(store)} cards")
        return to_session_response(session)

    def get_session(self, session_id: str) -> EditorSessionResponse:
        return to_session_response(self.sessions.get(session_id))

    def close_session(self, session_id: str) -> dict:
        self.sessions.get(session_id)
        self.sessions.close(session_id)
        return {"status": "success", "message": "Session closed"}

    def add_card(self, session_id: str) -> CardResponse:
        session = self.sessions.get(session_id)
        return to_card_response(session.store.create())

    def update_card(self, session_id: str, card_id: int, card_update: CardUpdate) -> CardResponse:
        """Replace a card's raw title and/or rows text."""
        store = self.sessions.get(session_id).store
        card = store.get(card_id)
        if card is None:
            raise HTTPException(status_code=404, detail="Card not found")

        if card_update.title is not None:
            store.set_title(card_id, card_update.title)
        if card_update.rows is not None:
            store.set_rows(card_id, card_update.rows)
        return to_card_response(card)

    def delete_card(self, session_id: str, card_id: int) -> EditorSessionResponse:
        """Delete a card. Deleting a card that is already gone is not an error."""
        session = self.sessions.get(session_id)
        session.store.remove(card_id)
        return to_session_response(session)

    def clear_cards(self, session_id: str) -> EditorSessionResponse:
        """Remove every card, reset the counter and drop the stored deck."""
        session = self.sessions.get(session_id)
        session.store.clear()
        DeckStorageService(self.db).delete(session.name)
        logger.info(f"Cleared all cards in session {session_id}")
        return to_session_response(session)

    def reorder_cards(self, session_id: str, reorder: CardReorder) -> EditorSessionResponse:
        session = self.sessions.get(session_id)
        insert_before = reorder.insert_before
        if insert_before is None:
            insert_before = insert_before_from_pointer(
                reorder.pointer_y, reorder.target_top, reorder.target_height
            )

        session.store.reorder(reorder.dragged_id, reorder.target_id, insert_before)
        return to_session_response(session)

    def save(self, session_id: str) -> dict:
        session = self.sessions.get(session_id)
        DeckStorageService(self.db).save(session.name, session.store)
        return {
            "message": "Data saved successfully!",
            "name": session.name,
            "card_count": len(session.store)
        }

    def load(self, session_id: str) -> EditorSessionResponse:
        """Replace the session's cards with its stored deck."""
        session = self.sessions.get(session_id)
        store = DeckStorageService(self.db).load(session.name)
        if store is None:
            raise HTTPException(status_code=404, detail=f"No saved data for deck '{session.name}'")

        session.store.replace_all(store.cards, store.card_id_counter)
        return to_session_response(session)
