from pydantic import BaseModel, Field
from typing import Optional, Any
from datetime import datetime

from models.resume import ResumeRecord, confidence_level
from models.session import ResumeSession
from models.template import TemplateInfo
from services.parser.confidence import needs_attention


class ErrorResponse(BaseModel):
    """Standard error response."""
    error_code: str
    message: str
    details: Optional[dict[str, Any]] = None


class ResumeSessionResponse(BaseModel):
    """A resume session's record with its confidence badges."""
    session_id: str
    filename: str = ""
    method: str = "local"
    resume_data: ResumeRecord
    confidence: dict[str, float]
    confidence_levels: dict[str, str]
    needs_attention: list[str]
    updated_at: datetime

    @classmethod
    def from_session(cls, session: ResumeSession) -> "ResumeSessionResponse":
        return cls(
            session_id=session.session_id,
            filename=session.filename,
            method=session.method,
            resume_data=session.record,
            confidence=session.confidence,
            confidence_levels={
                key: confidence_level(score).value
                for key, score in session.confidence.items()
            },
            needs_attention=needs_attention(session.confidence),
            updated_at=session.updated_at,
        )


class ResumeUploadResponse(ResumeSessionResponse):
    """Response after uploading and parsing a resume."""
    parsed_at: datetime = Field(default_factory=datetime.utcnow)


class TemplateListResponse(BaseModel):
    templates: list[TemplateInfo]


class PlaceholderHelpResponse(BaseModel):
    placeholders: list[str]


class TemplateDeleteResponse(BaseModel):
    template_id: str
    deleted: bool = True
