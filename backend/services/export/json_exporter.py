import json
from datetime import datetime
from typing import Any, Optional

from models.resume import ConfidenceMap, ResumeRecord


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder for datetime objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


def export_resume_dict(
    record: ResumeRecord,
    confidence: Optional[ConfidenceMap] = None,
    template_id: str = "",
) -> dict:
    """Export resume data as a dictionary.

    Args:
        record: The resume record to export.
        confidence: Optional per-field confidence map.
        template_id: Template the export was made with.

    Returns:
        Dictionary with the record under "resume_data".
    """
    data = {
        "resume_data": record.model_dump(),
        "template_id": template_id,
        "exported_at": datetime.utcnow(),
    }
    if confidence is not None:
        data["confidence"] = dict(confidence)
    return data


def export_resume_json(
    record: ResumeRecord,
    confidence: Optional[ConfidenceMap] = None,
    template_id: str = "",
    pretty: bool = True,
) -> str:
    """Export resume data as JSON string.

    Args:
        record: The resume record to export.
        confidence: Optional per-field confidence map.
        template_id: Template the export was made with.
        pretty: Whether to format with indentation.

    Returns:
        JSON string representation of the resume.
    """
    data = export_resume_dict(record, confidence, template_id)
    if pretty:
        return json.dumps(data, indent=2, cls=DateTimeEncoder)
    return json.dumps(data, cls=DateTimeEncoder)
