from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field


class ExportFormat(Enum):
    HTML = "html"
    JSON = "json"
    PDF = "pdf"
    DOCX = "docx"


MEDIA_TYPES = {
    ExportFormat.HTML: "text/html",
    ExportFormat.JSON: "application/json",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class ExportArtifact(BaseModel):
    filename: str
    # Unicode form of the filename, sent as the RFC 5987 filename* parameter
    display_filename: str = ""
    media_type: str
    content: bytes = Field(repr=False)
    format: ExportFormat

    @property
    def content_disposition(self) -> str:
        display = quote(self.display_filename or self.filename, safe="")
        return f"attachment; filename={self.filename}; filename*=UTF-8''{display}"
