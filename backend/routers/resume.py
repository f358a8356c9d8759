from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from typing import Literal, Optional
import logging

from config import get_settings
from services.documents import DocumentError, DocumentFile, decode
from services.extraction import get_resume_extractor
from services.session import SessionManager, get_session_manager
from schemas.requests import ResumeUpdateRequest
from schemas.responses import ResumeSessionResponse, ResumeUploadResponse
from routers.errors import to_http_exception

router = APIRouter(prefix="/api/resume", tags=["Resume"])
logger = logging.getLogger(__name__)


@router.post("/upload", response_model=ResumeUploadResponse)
async def upload_resume(
    file: UploadFile = File(...),
    mode: Optional[Literal["local", "remote"]] = Query(None),
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Upload and parse a resume file.

    Accepts PDF, DOCX, DOC, or TXT files.

    Args:
        mode: "local" heuristics or "remote" LLM extraction (settings default).

    Returns:
        ResumeUploadResponse with session_id, parsed fields and confidence.
    """
    session_manager.cleanup_expired(get_settings().session_timeout_minutes)

    document = DocumentFile(file.filename or "", await file.read())
    try:
        text = await run_in_threadpool(decode, document)
    except DocumentError as e:
        raise to_http_exception(e)

    extractor = get_resume_extractor(mode)
    result = await extractor.extract(text)

    session = session_manager.create_session(
        result.record,
        result.confidence,
        filename=document.filename,
        method=result.method.value,
    )
    logger.info(
        f"Parsed {document.filename} ({result.method.value}) into session {session.session_id}, "
        f"{len(result.record.empty_fields())} empty fields"
    )
    return ResumeUploadResponse.from_session(session)


def _require_session(session_manager: SessionManager, session_id: str):
    session = session_manager.get_session(session_id)
    if not session:
        raise HTTPException(
            status_code=404,
            detail="Resume not found. It may have expired.",
        )
    return session


@router.get("/{session_id}", response_model=ResumeSessionResponse)
async def get_resume(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Get parsed resume data by session ID.

    Args:
        session_id: The resume session ID from upload.

    Returns:
        Current resume fields and confidence.
    """
    return ResumeSessionResponse.from_session(_require_session(session_manager, session_id))


@router.put("/{session_id}", response_model=ResumeSessionResponse)
async def update_resume(
    session_id: str,
    request: ResumeUpdateRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Apply edits to a resume session's fields.

    Returns:
        The updated fields and confidence.
    """
    _require_session(session_manager, session_id)
    session = session_manager.update_fields(session_id, request.to_updates())
    if session is None:
        raise HTTPException(status_code=404, detail="Resume not found. It may have expired.")
    return ResumeSessionResponse.from_session(session)


@router.delete("/{session_id}")
async def delete_resume(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Discard a resume session."""
    if not session_manager.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Resume not found. It may have expired.")
    return {"session_id": session_id, "deleted": True}
