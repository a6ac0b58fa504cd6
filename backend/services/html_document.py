from fastapi import HTTPException
import logging

from services.editor_session import SessionManager, to_card_response
from utils.html_processing import extract_cards, render_document, render_preview, NoCardsFound

from api.models.requests.html_document import HTMLImport
from api.models.responses.html_document import HTMLExportResponse, HTMLImportResponse

logger = logging.getLogger(__name__)

class HTMLDocumentService:
    """Export a session's cards as HTML and import cards back from HTML."""

    def __init__(self, sessions: SessionManager):
        self.sessions = sessions

    def export_document(self, session_id: str) -> HTMLExportResponse:
        store = self.sessions.get(session_id).store
        return HTMLExportResponse(html=render_document(store.cards), card_count=len(store))

    def export_preview(self, session_id: str) -> HTMLExportResponse:
        store = self.sessions.get(session_id).store
        return HTMLExportResponse(html=render_preview(store.cards), card_count=len(store))

    def import_document(self, session_id: str, request: HTMLImport) -> HTMLImportResponse:
        """Parse HTML and, if it holds any valid cards, replace the session's cards with them.

        The store is left untouched on every failure path.
        """
        session = self.sessions.get(session_id)
        html_content = request.html.strip()
        if not html_content:
            raise HTTPException(status_code=400, detail="No HTML content to parse")

        try:
            result = extract_cards(html_content)
        except NoCardsFound as e:
            logger.warning(f"Import into session {session_id} failed: {e.message}")
            raise HTTPException(status_code=422, detail=f"Error parsing HTML: {e.message}")

        if not result.cards:
            raise HTTPException(status_code=422, detail="No valid spec cards found in the HTML")

        session.store.replace_all(result.cards, result.max_id)
        logger.info(f"Imported {len(result.cards)} cards into session {session_id}")
        return HTMLImportResponse(
            message=f"Successfully imported {len(result.cards)} card(s)!",
            imported_count=len(result.cards),
            card_id_counter=session.store.card_id_counter,
            cards=[to_card_response(card) for card in session.store.cards]
        )
