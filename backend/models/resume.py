from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


# Canonical field order. The first fourteen mirror the current form schema;
# `references` is carried over from the older schema.
RESUME_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "location",
    "website",
    "linkedin",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "achievements",
    "references",
)

LEGACY_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "location",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "references",
)

ConfidenceMap = dict[str, float]


class ConfidenceLevel(Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


def confidence_level(score: float) -> ConfidenceLevel:
    """Map a confidence score onto the badge tier shown next to a field."""
    if score > 0.8:
        return ConfidenceLevel.HIGH
    if score > 0.5:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


class ResumeRecord(BaseModel):
    """Structured resume content, one plain-text field per section.

    Every field is always a string; a missing value is "" and never None.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""
    projects: str = ""
    certifications: str = ""
    languages: str = ""
    achievements: str = ""
    references: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    def empty_fields(self) -> list[str]:
        return [key for key in RESUME_FIELDS if not getattr(self, key).strip()]

    def to_legacy_dict(self) -> dict[str, str]:
        """Subset view used by the older twelve-field forms."""
        return {key: getattr(self, key) for key in LEGACY_FIELDS}

    @classmethod
    def from_partial(cls, data: dict[str, Any]) -> "ResumeRecord":
        """Build a record from loosely-typed data.

        Unknown keys are ignored, non-string values are discarded and
        strings are trimmed.
        """
        values = {}
        for key in RESUME_FIELDS:
            value = data.get(key)
            if isinstance(value, str):
                values[key] = value.strip()
        return cls(**values)
