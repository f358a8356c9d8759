from models.resume import (
    RESUME_FIELDS,
    LEGACY_FIELDS,
    ConfidenceMap,
    ConfidenceLevel,
    ResumeRecord,
    confidence_level,
)
from models.template import TemplateInfo, CustomTemplate
from models.export import ExportFormat, ExportArtifact, MEDIA_TYPES
from models.session import ResumeSession

__all__ = [
    # Resume
    "RESUME_FIELDS",
    "LEGACY_FIELDS",
    "ConfidenceMap",
    "ConfidenceLevel",
    "ResumeRecord",
    "confidence_level",
    # Templates
    "TemplateInfo",
    "CustomTemplate",
    # Export
    "ExportFormat",
    "ExportArtifact",
    "MEDIA_TYPES",
    # Sessions
    "ResumeSession",
]
