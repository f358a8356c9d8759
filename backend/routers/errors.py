from fastapi import HTTPException

from services.documents import DocumentError, UnsupportedFormatError
from services.templates import (
    TemplateError,
    TemplateNotFoundError,
)


def to_http_exception(error: Exception) -> HTTPException:
    """Translate a decoder or template error into an HTTP error."""
    if isinstance(error, UnsupportedFormatError):
        return HTTPException(status_code=415, detail=str(error))
    if isinstance(error, TemplateNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, (DocumentError, TemplateError)):
        return HTTPException(status_code=422, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))
