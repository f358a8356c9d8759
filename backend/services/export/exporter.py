"""Resume export in HTML, JSON, PDF and DOCX formats."""

import logging
import re
import unicodedata
from datetime import date
from functools import lru_cache
from typing import Optional

from models.export import MEDIA_TYPES, ExportArtifact, ExportFormat
from models.resume import ConfidenceMap, ResumeRecord
from services.templates import get_template_store
from services.templates.store import TemplateStore

from .encoders import BinaryEncoder, PlaceholderEncoder
from .html_exporter import render_resume_html
from .json_exporter import export_resume_json


logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_RE = re.compile(r"[^\w.\-]")
_NON_ASCII_FILENAME_RE = re.compile(r"[^A-Za-z0-9_.\-]")


def _filename(stem: str, fmt: ExportFormat) -> str:
    base = f"{stem}_Resume" if stem else "Resume"
    return f"{base}.{fmt.value}"


def display_filename(name: str, fmt: ExportFormat) -> str:
    """Download name keeping non-ASCII letters, such as "José_Doe_Resume.pdf"."""
    return _filename(_UNSAFE_FILENAME_RE.sub("", re.sub(r"\s+", "_", name.strip())), fmt)


def export_filename(name: str, fmt: ExportFormat) -> str:
    """ASCII download name such as "Jane_Doe_Resume.pdf".

    Accents are folded ("José" becomes "Jose"); other non-ASCII characters
    are dropped.
    """
    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return _filename(_NON_ASCII_FILENAME_RE.sub("", re.sub(r"\s+", "_", folded.strip())), fmt)


class ResumeExporter:
    """Renders a record with a template and packages it for download."""

    def __init__(
        self,
        encoder: Optional[BinaryEncoder] = None,
        store: Optional[TemplateStore] = None,
    ):
        self.encoder = encoder or PlaceholderEncoder()
        self.store = store

    def preview(self, record: ResumeRecord, template_id: str, today: Optional[date] = None) -> str:
        """Render the HTML preview for a template."""
        return render_resume_html(template_id, record, self.store or get_template_store(), today)

    def export(
        self,
        record: ResumeRecord,
        template_id: str,
        fmt: ExportFormat,
        confidence: Optional[ConfidenceMap] = None,
        today: Optional[date] = None,
    ) -> ExportArtifact:
        """Export a record in the requested format.

        Raises:
            TemplateNotFoundError: If the template id is unknown
            TemplateEmptyError: If a custom template holds no text
            TemplateProcessingError: If a custom template cannot be filled
        """
        if fmt == ExportFormat.JSON:
            # Resolve the template so unknown ids fail the same way for every format
            (self.store or get_template_store()).get(template_id)
            content = export_resume_json(record, confidence, template_id).encode("utf-8")
        else:
            html = self.preview(record, template_id, today)
            if fmt == ExportFormat.HTML:
                content = html.encode("utf-8")
            else:
                content = self.encoder.encode(html, fmt)

        logger.info(f"Exported resume as {fmt.value} with template {template_id} ({len(content)} bytes)")
        return ExportArtifact(
            filename=export_filename(record.name, fmt),
            display_filename=display_filename(record.name, fmt),
            media_type=MEDIA_TYPES[fmt],
            content=content,
            format=fmt,
        )


@lru_cache()
def get_resume_exporter() -> ResumeExporter:
    """Get the shared exporter (placeholder binary encoder)."""
    return ResumeExporter()
