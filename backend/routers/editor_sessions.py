from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db
from services.editor_session import EditorSessionService, SessionManager, get_session_manager
from api.models.requests.card import EditorSessionCreate, CardUpdate, CardReorder
from api.models.responses.card import CardResponse, EditorSessionResponse
from api.models.responses.html_document import StorageResponse

router = APIRouter()

@router.post("/", response_model=EditorSessionResponse)
async def create_session(
    request: EditorSessionCreate,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Open an editor session, restoring its saved deck if there is one."""
    service = EditorSessionService(sessions, db)
    return service.create_session(request)

@router.get("/{session_id}", response_model=EditorSessionResponse)
async def get_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Get a session with all its cards in display order."""
    service = EditorSessionService(sessions, db)
    return service.get_session(session_id)

@router.delete("/{session_id}")
async def close_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Close a session without touching its saved deck."""
    service = EditorSessionService(sessions, db)
    return service.close_session(session_id)

@router.post("/{session_id}/cards", response_model=CardResponse)
async def add_card(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Append a new card with the default title and rows."""
    service = EditorSessionService(sessions, db)
    return service.add_card(session_id)

@router.patch("/{session_id}/cards/{card_id}", response_model=CardResponse)
async def update_card(
    session_id: str,
    card_id: int,
    card_update: CardUpdate,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Update a card's title and/or rows text."""
    service = EditorSessionService(sessions, db)
    return service.update_card(session_id, card_id, card_update)

@router.delete("/{session_id}/cards/{card_id}", response_model=EditorSessionResponse)
async def delete_card(
    session_id: str,
    card_id: int,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Delete a card from the session."""
    service = EditorSessionService(sessions, db)
    return service.delete_card(session_id, card_id)

@router.delete("/{session_id}/cards", response_model=EditorSessionResponse)
async def clear_cards(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Remove all cards and the saved deck."""
    service = EditorSessionService(sessions, db)
    return service.clear_cards(session_id)

@router.post("/{session_id}/reorder", response_model=EditorSessionResponse)
async def reorder_cards(
    session_id: str,
    reorder: CardReorder,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Move a dragged card before or after the card it was dropped on."""
    service = EditorSessionService(sessions, db)
    return service.reorder_cards(session_id, reorder)

@router.post("/{session_id}/save", response_model=StorageResponse)
async def save_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Save the session's cards under its deck name."""
    service = EditorSessionService(sessions, db)
    return service.save(session_id)

@router.post("/{session_id}/load", response_model=EditorSessionResponse)
async def load_session(
    session_id: str,
    sessions: SessionManager = Depends(get_session_manager),
    db: Session = Depends(get_db)
):
    """Replace the session's cards with its saved deck."""
    service = EditorSessionService(sessions, db)
    return service.load(session_id)
