"""Section detection and body extraction for free-text resume sections."""

import re
from types import MappingProxyType
from typing import List, Mapping


# Synonym headings per field, in priority order. A heading must be the whole
# line, optionally followed by a colon.
SECTION_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "summary": (
        "summary", "professional summary", "career summary", "profile",
        "professional profile", "objective", "career objective", "about me",
    ),
    "experience": (
        "experience", "work experience", "professional experience", "work",
        "employment", "employment history", "work history", "career",
        "professional",
    ),
    "education": (
        "education", "academic background", "education and training",
        "qualification", "qualifications",
    ),
    "skills": (
        "skills", "technical skills", "core skills", "key skills",
        "core competencies", "technical", "expertise",
    ),
    "projects": (
        "projects", "personal projects", "project experience", "portfolio",
    ),
    "certifications": (
        "certifications", "certification", "certificates", "certificate",
        "licenses and certifications", "licenses",
    ),
    "languages": (
        "languages", "language", "language skills",
    ),
    "achievements": (
        "achievements", "achievement", "accomplishments", "awards",
        "honors", "honors and awards", "honors & awards",
    ),
    "references": (
        "references", "reference", "professional references",
    ),
})

# Maximum characters kept per section body
SECTION_MAX_LENGTH: Mapping[str, int] = MappingProxyType({
    "summary": 500,
    "experience": 1000,
    "education": 1000,
    "skills": 1000,
    "projects": 1000,
    "certifications": 500,
    "languages": 500,
    "achievements": 500,
    "references": 500,
})
DEFAULT_MAX_LENGTH = 1000

_KNOWN_HEADERS = frozenset(
    keyword for keywords in SECTION_KEYWORDS.values() for keyword in keywords
)

# Short, capitalised, no sentence punctuation: "EDUCATION", "Volunteer Work:"
_HEADER_SHAPE_RE = re.compile(r"^[A-Z][A-Za-z &/]+:?$")
_HEADER_MAX_LENGTH = 30

_REFERENCES_ON_REQUEST_RE = re.compile(
    r"references?\s+(?:are\s+)?available\s+(?:up)?on\s+request", re.IGNORECASE
)

# Fallback scans used when a resume has no heading for the field
_JOB_LINE_RE = re.compile(
    r"^(?P<title>[A-Z][A-Za-z/&\- ]*?)\s+(?:at|@)\s+"
    r"(?P<company>[A-Z][A-Za-z0-9&.,' \-]*?)[ \t,]*\(?"
    r"(?P<years>(?:19|20)\d{2}\s*[-–]\s*(?:Present|Current|(?:19|20)\d{2}))\)?"
)
_DEGREE_RE = re.compile(
    r"\b(?:Bachelor|Master|Ph\.?D|MBA)\b|(?<![A-Za-z])[BM]\.(?:S|A|Sc)\."
)
_CERTIFICATION_RE = re.compile(
    r"\b(?:certified|certification|certificate|licen[cs]e)", re.IGNORECASE
)
COMMON_LANGUAGES = (
    "English", "Spanish", "French", "German", "Chinese",
    "Japanese", "Portuguese", "Italian", "Russian", "Arabic",
)
_LANGUAGE_PATTERNS = tuple(
    (language, re.compile(rf"\b{language}\b")) for language in COMMON_LANGUAGES
)


def _normalize(line: str) -> str:
    return re.sub(r"\s+", " ", line.strip().rstrip(":").strip()).lower()


def is_known_section_header(line: str) -> bool:
    """True when the line is exactly one of the known section headings."""
    return _normalize(line) in _KNOWN_HEADERS


def looks_like_section_header(line: str) -> bool:
    """Check if a line looks like the start of a new section."""
    stripped = line.strip()
    if not stripped:
        return False
    if is_known_section_header(stripped):
        return True
    if len(stripped) >= _HEADER_MAX_LENGTH:
        return False
    if "." in stripped or "," in stripped:
        return False
    return bool(_HEADER_SHAPE_RE.match(stripped))


def _header_regex(keyword: str) -> re.Pattern:
    escaped = r"\s+".join(re.escape(part) for part in keyword.split())
    return re.compile(rf"^\s*{escaped}\s*:?\s*$", re.IGNORECASE)


def _collect_body(lines: List[str], start: int) -> List[str]:
    body: List[str] = []
    for line in lines[start:]:
        stripped = line.strip()
        if not stripped:
            continue
        if looks_like_section_header(stripped):
            break
        body.append(stripped)
    return body


def extract_section(text: str, keywords: tuple[str, ...], max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Extract the body of the first section introduced by one of the keywords.

    Keywords are tried in order. For each, every line that is exactly that
    heading starts a candidate body made of the following non-empty lines up
    to the next header-looking line. The first non-empty body wins.

    Args:
        text: Raw resume text
        keywords: Heading synonyms in priority order
        max_length: Truncation limit for the returned body

    Returns:
        Section body joined with newlines, or empty string
    """
    lines = text.splitlines()
    for keyword in keywords:
        header_re = _header_regex(keyword)
        for index, line in enumerate(lines):
            if not header_re.match(line):
                continue
            body = _collect_body(lines, index + 1)
            if body:
                return "\n".join(body).strip()[:max_length].strip()
    return ""


def extract_field_section(text: str, field: str) -> str:
    """Extract a record field by its configured heading synonyms."""
    return extract_section(
        text,
        SECTION_KEYWORDS[field],
        SECTION_MAX_LENGTH.get(field, DEFAULT_MAX_LENGTH),
    )


def extract_summary(text: str) -> str:
    return extract_field_section(text, "summary")


def _matching_lines(text: str, pattern: re.Pattern, field: str) -> str:
    lines = [
        line.strip() for line in text.splitlines()
        if line.strip()
        and not is_known_section_header(line)
        and pattern.search(line)
    ]
    return "\n".join(lines)[:SECTION_MAX_LENGTH[field]].strip()


def extract_experience(text: str) -> str:
    """Extract experience, falling back to "Title at Company (years)" lines."""
    section = extract_field_section(text, "experience")
    if section:
        return section
    jobs = []
    for line in text.splitlines():
        match = _JOB_LINE_RE.match(line.strip())
        if match:
            jobs.append(
                f"{match.group('title')} at {match.group('company')} ({match.group('years')})"
            )
    return "\n".join(jobs)[:SECTION_MAX_LENGTH["experience"]].strip()


def extract_education(text: str) -> str:
    """Extract education, falling back to lines naming a degree."""
    section = extract_field_section(text, "education")
    if section:
        return section
    return _matching_lines(text, _DEGREE_RE, "education")


def extract_projects(text: str) -> str:
    return extract_field_section(text, "projects")


def extract_certifications(text: str) -> str:
    section = extract_field_section(text, "certifications")
    if section:
        return section
    return _matching_lines(text, _CERTIFICATION_RE, "certifications")


def extract_languages(text: str) -> str:
    """Extract languages, falling back to common language names in the text."""
    section = extract_field_section(text, "languages")
    if section:
        return section
    found = [language for language, pattern in _LANGUAGE_PATTERNS if pattern.search(text)]
    return ", ".join(found)


def extract_achievements(text: str) -> str:
    return extract_field_section(text, "achievements")


def extract_references(text: str) -> str:
    """Extract references, recognising "available upon request" phrasing."""
    section = extract_field_section(text, "references")
    if section:
        return section
    if _REFERENCES_ON_REQUEST_RE.search(text):
        return "Available upon request"
    return ""
