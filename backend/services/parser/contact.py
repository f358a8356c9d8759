"""Contact information extraction (name, email, phone, location) from resume text."""

import re
from typing import Pattern

from .sections import is_known_section_header


# Email pattern constants
_EMAIL_PATTERN = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
_EMAIL_RE = re.compile(rf"\b{_EMAIL_PATTERN}\b")

# Name candidates come from the top of the document only
NAME_SCAN_LINES = 8
NAME_MAX_LENGTH = 60

# Ordered: first pattern to match a line wins
NAME_PATTERNS: tuple[Pattern[str], ...] = (
    # First [M.] Last [Last]
    re.compile(r"^([A-Z][a-z'\-]+(?:\s+[A-Z]\.?)?(?:\s+[A-Z][a-z'\-]+){1,2})$"),
    # Two to four Title Case tokens
    re.compile(r"^([A-Z][a-z'\-]+(?:\s+[A-Z][a-z'\-]*){1,3})$"),
    # ALL CAPS
    re.compile(r"^([A-Z][A-Z'\-]+(?:\s+[A-Z]\.?)?(?:\s+[A-Z][A-Z'\-]+){1,3})$"),
)

_NAME_LABEL_RE = re.compile(
    r"(?:^|\n)[ \t]*(?:Full Name|Name)[ \t]*:[ \t]*([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]*){1,3})[ \t]*(?:\n|$)",
    re.IGNORECASE,
)
_URL_RE = re.compile(r"https?://|www\.|\b[\w-]+\.(?:com|org|net|io|dev|me)\b", re.IGNORECASE)
_NOT_A_NAME_RE = re.compile(r"\b(?:resume|cv|curriculum|vitae)\b", re.IGNORECASE)

_PHONE_LABEL = r"(?:phone|tel|telephone|mobile|cell)"
PHONE_PATTERNS: tuple[Pattern[str], ...] = (
    # North American: (415) 555-0199, 415.555.0199, +1 415 555 0199
    re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),
    # Generic digit grouping: +44 20 7946 0958, 020-7946-0958
    re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{3,4}"),
    # Labelled: "Mobile: 98480 22338"
    re.compile(rf"{_PHONE_LABEL}\s*:?\s*[+\d(][\d\s().-]{{8,}}\d", re.IGNORECASE),
    # International: +91 98480 22338
    re.compile(r"\+\d{1,3}[\s.-]?\d[\d\s.-]{7,}\d"),
)
_PHONE_LABEL_RE = re.compile(rf"^{_PHONE_LABEL}\s*:?\s*", re.IGNORECASE)
PHONE_MIN_DIGITS = 10

_CITY = r"[A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+){0,2}"
LOCATION_PATTERNS: tuple[Pattern[str], ...] = (
    # City, ST [ZIP]
    re.compile(rf"\b({_CITY},[ \t]*[A-Z]{{2}}\b(?:[ \t]+\d{{5}}(?:-\d{{4}})?)?)"),
    # City, State ZIP
    re.compile(rf"\b({_CITY},[ \t]*[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)?[ \t]+\d{{5}}(?:-\d{{4}})?)\b"),
    # City, Country
    re.compile(rf"\b({_CITY},[ \t]*[A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)?)\b"),
    # Labelled
    re.compile(r"\b(?:location|address|based in|lives in)\b[ \t]*:?[ \t]*([^\s,][^\n]*)", re.IGNORECASE),
)


def extract_email(text: str) -> str:
    """Extract the first email address from resume text.

    Args:
        text: Raw resume text

    Returns:
        Extracted email address or empty string
    """
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else ""


def _digit_count(value: str) -> int:
    return sum(ch.isdigit() for ch in value)


def extract_phone(text: str) -> str:
    """Extract a phone number from resume text.

    Patterns are tried in priority order. Within the first pattern that
    produces a match with at least ten digits, the longest such match wins
    (earliest on ties). A leading "Phone:"-style label is stripped.

    Args:
        text: Raw resume text

    Returns:
        Phone number as written (whitespace normalised) or empty string
    """
    for pattern in PHONE_PATTERNS:
        candidates = [
            m.group(0) for m in pattern.finditer(text)
            if _digit_count(m.group(0)) >= PHONE_MIN_DIGITS
        ]
        if not candidates:
            continue
        best = max(candidates, key=len)
        best = _PHONE_LABEL_RE.sub("", best.strip())
        return re.sub(r"\s+", " ", best).strip()
    return ""


def _is_name_candidate(line: str) -> bool:
    if len(line) > NAME_MAX_LENGTH:
        return False
    if "@" in line or "|" in line:
        return False
    if line[0].isdigit():
        return False
    if _URL_RE.search(line) or _NOT_A_NAME_RE.search(line):
        return False
    if is_known_section_header(line):
        return False
    return True


def extract_name(text: str) -> str:
    """Extract candidate name from resume text.

    Scans the first few non-empty lines, skipping contact lines, URLs,
    "Resume"/"CV" titles and section headers, and returns the first line
    matching one of the name patterns. Falls back to a "Name: ..." label.

    Args:
        text: Raw resume text

    Returns:
        Extracted name or empty string
    """
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    for line in lines[:NAME_SCAN_LINES]:
        if not _is_name_candidate(line):
            continue
        for pattern in NAME_PATTERNS:
            match = pattern.match(line)
            if match:
                return match.group(1).strip()

    # Try label-based pattern
    label_match = _NAME_LABEL_RE.search(text)
    if label_match:
        return label_match.group(1).strip()

    return ""


def extract_location(text: str) -> str:
    """Extract a location such as "San Francisco, CA" from resume text.

    Args:
        text: Raw resume text

    Returns:
        First acceptable location (longer than 3 characters, containing a
        comma) or empty string
    """
    for pattern in LOCATION_PATTERNS:
        for match in pattern.finditer(text):
            candidate = match.group(1).strip()
            if len(candidate) > 3 and "," in candidate:
                return candidate
    return ""
