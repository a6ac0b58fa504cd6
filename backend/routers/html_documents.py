from fastapi import APIRouter, Depends
from services.editor_session import SessionManager, get_session_manager
from services.html_document import HTMLDocumentService
from api.models.requests.html_document import HTMLImport
from api.models.responses.html_document import HTMLExportResponse, HTMLImportResponse

router = APIRouter()

@router.get("/{session_id}/html", response_model=HTMLExportResponse)
async def export_html(session_id: str, sessions: SessionManager = Depends(get_session_manager)):
    """Get the complete exportable HTML document for a session."""
    service = HTMLDocumentService(sessions)
    return service.export_document(session_id)

@router.get("/{session_id}/preview", response_model=HTMLExportResponse)
async def export_preview(session_id: str, sessions: SessionManager = Depends(get_session_manager)):
    """Get the preview fragment for a session."""
    service = HTMLDocumentService(sessions)
    return service.export_preview(session_id)

@router.post("/{session_id}/import", response_model=HTMLImportResponse)
async def import_html(
    session_id: str,
    request: HTMLImport,
    sessions: SessionManager = Depends(get_session_manager)
):
    """Replace a session's cards with the cards found in an HTML document."""
    service = HTMLDocumentService(sessions)
    return service.import_document(session_id, request)
