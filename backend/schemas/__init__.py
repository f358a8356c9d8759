from schemas.requests import ResumeUpdateRequest
from schemas.responses import (
    ErrorResponse,
    ResumeSessionResponse,
    ResumeUploadResponse,
    TemplateListResponse,
    PlaceholderHelpResponse,
    TemplateDeleteResponse,
)

__all__ = [
    "ResumeUpdateRequest",
    "ErrorResponse",
    "ResumeSessionResponse",
    "ResumeUploadResponse",
    "TemplateListResponse",
    "PlaceholderHelpResponse",
    "TemplateDeleteResponse",
]
