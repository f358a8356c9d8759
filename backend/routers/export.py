from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, StreamingResponse
from io import BytesIO

from models.export import ExportFormat
from services.export import ResumeExporter
from services.export.exporter import get_resume_exporter
from services.session import SessionManager, get_session_manager
from services.templates import TemplateError
from routers.errors import to_http_exception

router = APIRouter(prefix="/api/export", tags=["Export"])


def _require_session(session_manager: SessionManager, session_id: str):
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Resume not found. It may have expired.")
    return session


@router.get("/{session_id}/preview", response_class=HTMLResponse)
async def preview_resume(
    session_id: str,
    template_id: str = Query(...),
    session_manager: SessionManager = Depends(get_session_manager),
    exporter: ResumeExporter = Depends(get_resume_exporter),
):
    """Render the resume with a template as an HTML page."""
    session = _require_session(session_manager, session_id)
    try:
        html = await run_in_threadpool(exporter.preview, session.record, template_id)
    except TemplateError as e:
        raise to_http_exception(e)
    return HTMLResponse(html)


@router.get("/{session_id}")
async def download_resume(
    session_id: str,
    template_id: str = Query(...),
    format: ExportFormat = Query(ExportFormat.HTML),
    session_manager: SessionManager = Depends(get_session_manager),
    exporter: ResumeExporter = Depends(get_resume_exporter),
):
    """Download the resume in the requested format.

    Returns:
        File download.
    """
    session = _require_session(session_manager, session_id)
    try:
        artifact = await run_in_threadpool(
            exporter.export, session.record, template_id, format, session.confidence
        )
    except TemplateError as e:
        raise to_http_exception(e)

    return StreamingResponse(
        BytesIO(artifact.content),
        media_type=artifact.media_type,
        headers={"Content-Disposition": artifact.content_disposition},
    )
