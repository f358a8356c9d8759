"""Data classes returned by the resume field extractor."""

from dataclasses import dataclass, field
from enum import Enum

from models.resume import ConfidenceMap, ResumeRecord, confidence_level


class ExtractionMethod(Enum):
    """Which strategy produced a record."""
    LOCAL = "local"
    REMOTE = "remote"


@dataclass
class ExtractionResult:
    """A freshly extracted record with its per-field confidence."""
    record: ResumeRecord
    confidence: ConfidenceMap = field(default_factory=dict)
    method: ExtractionMethod = ExtractionMethod.LOCAL

    def to_dict(self) -> dict:
        return {
            "resume_data": self.record.model_dump(),
            "confidence": dict(self.confidence),
            "confidence_levels": {
                key: confidence_level(score).value
                for key, score in self.confidence.items()
            },
            "method": self.method.value,
        }
