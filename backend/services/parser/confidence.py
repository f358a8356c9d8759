"""Heuristic per-field confidence scores for extracted resume fields.

Scores are not probabilities. They fall into three tiers so the edit form can
show a High / Medium / Low badge, and an empty field always scores 0.
"""

import re
from typing import Callable, Dict

from models.resume import RESUME_FIELDS, ConfidenceMap, ResumeRecord


HIGH = 0.9
MEDIUM = 0.7
LOW = 0.4

_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
_CITY_STATE_RE = re.compile(r"^[A-Z][A-Za-z .'-]+,\s*[A-Z]{2}\b")


def _score_name(value: str) -> float:
    tokens = value.split()
    if 2 <= len(tokens) <= 4 and len(value) >= 5:
        return HIGH
    if len(value) >= 3:
        return MEDIUM
    return LOW


def _score_email(value: str) -> float:
    if _EMAIL_RE.match(value):
        return HIGH
    return MEDIUM if "@" in value else LOW


def _score_phone(value: str) -> float:
    digits = sum(ch.isdigit() for ch in value)
    if 10 <= digits <= 15:
        return HIGH
    return MEDIUM if digits >= 7 else LOW


def _score_location(value: str) -> float:
    if _CITY_STATE_RE.match(value):
        return HIGH
    return MEDIUM if "," in value else LOW


def _score_url(value: str) -> float:
    if value.startswith(("http://", "https://")) and "." in value:
        return HIGH
    return LOW


def _score_skills(value: str) -> float:
    entries = [e for e in re.split(r"[,\n;|•]+", value) if e.strip()]
    if len(entries) >= 5:
        return HIGH
    if len(entries) >= 2:
        return MEDIUM
    return LOW


def _score_section(value: str) -> float:
    if len(value) >= 200:
        return HIGH
    if len(value) >= 50:
        return MEDIUM
    return LOW


_SCORERS: Dict[str, Callable[[str], float]] = {
    "name": _score_name,
    "email": _score_email,
    "phone": _score_phone,
    "location": _score_location,
    "website": _score_url,
    "linkedin": _score_url,
    "skills": _score_skills,
}


def score_field(field: str, value: str) -> float:
    """Score a single field value."""
    if not value or not value.strip():
        return 0.0
    scorer = _SCORERS.get(field, _score_section)
    return scorer(value.strip())


def score_record(record: ResumeRecord) -> ConfidenceMap:
    """Score every field of a record."""
    return {field: score_field(field, getattr(record, field)) for field in RESUME_FIELDS}


def needs_attention(confidence: ConfidenceMap) -> list[str]:
    """Fields the edit form should flag: anything with confidence 0."""
    return [field for field in RESUME_FIELDS if confidence.get(field, 0.0) == 0]
