"""Placeholder spellings recognised in resume templates.

Each record field can be written as ``{{key}}``, ``{key}``, ``[KEY]`` or
``<<KEY>>``, using the field key or one of its aliases. Matching is
case-insensitive and tolerates spaces inside the brackets.
"""

import re
from types import MappingProxyType
from typing import List, Mapping

from models.resume import RESUME_FIELDS


FIELD_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "name": ("FULL_NAME",),
    "email": ("EMAIL_ADDRESS",),
    "phone": ("PHONE_NUMBER",),
    "location": ("ADDRESS",),
    "website": ("WEBSITE_URL", "PORTFOLIO"),
    "linkedin": ("LINKEDIN_URL",),
    "summary": ("PROFESSIONAL_SUMMARY", "OBJECTIVE"),
    "experience": ("WORK_EXPERIENCE", "EMPLOYMENT"),
    "education": ("ACADEMIC_BACKGROUND",),
    "skills": ("TECHNICAL_SKILLS",),
    "projects": ("PROJECT_EXPERIENCE",),
    "certifications": ("CERTIFICATES",),
    "languages": ("LANGUAGE_SKILLS",),
    "achievements": ("ACCOMPLISHMENTS", "AWARDS"),
    "references": ("PROFESSIONAL_REFERENCES",),
})

FIELD_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "name": "Your full name",
    "email": "Email address",
    "phone": "Phone number",
    "location": "Location/Address",
    "website": "Personal website",
    "linkedin": "LinkedIn profile",
    "summary": "Professional summary",
    "experience": "Work experience",
    "education": "Educational background",
    "skills": "Technical skills",
    "projects": "Project experience",
    "certifications": "Certifications",
    "languages": "Language skills",
    "achievements": "Achievements and awards",
    "references": "Professional references",
})

# "<<" and ">>" also match their HTML-escaped form, since Word templates are
# decoded to escaped HTML. {{x}} must come before {x}.
_BRACKETS: tuple[tuple[str, str], ...] = (
    (r"\{\{", r"\}\}"),
    (r"\{", r"\}"),
    (r"\[", r"\]"),
    (r"(?:<<|&lt;&lt;)", r"(?:>>|&gt;&gt;)"),
)


def placeholder_names(field: str) -> tuple[str, ...]:
    """The key followed by its aliases."""
    return (field,) + FIELD_ALIASES.get(field, ())


def spellings_pattern(*names: str) -> str:
    """Regex source matching every bracket spelling of the given names."""
    alternatives = [
        rf"{left}[ \t]*{re.escape(name)}[ \t]*{right}"
        for name in names
        for left, right in _BRACKETS
    ]
    return "(?:" + "|".join(alternatives) + ")"


FIELD_PLACEHOLDERS: Mapping[str, re.Pattern] = MappingProxyType({
    field: re.compile(spellings_pattern(*placeholder_names(field)), re.IGNORECASE)
    for field in RESUME_FIELDS
})

DATE_PLACEHOLDER: re.Pattern = re.compile(spellings_pattern("date"), re.IGNORECASE)

# Anything placeholder-shaped left over after substitution
UNMATCHED_PLACEHOLDER: re.Pattern = re.compile(
    r"(?:\{\{[ \t]*[A-Za-z_][\w .\-]*?[ \t]*\}\}"
    r"|\{[ \t]*[A-Za-z_][\w .\-]*?[ \t]*\}"
    r"|\[[ \t]*[A-Za-z_][\w .\-]*?[ \t]*\]"
    r"|(?:<<|&lt;&lt;)[ \t]*[A-Za-z_][\w .\-]*?[ \t]*(?:>>|&gt;&gt;))"
)


def placeholder_help() -> List[str]:
    """Human-readable list of supported placeholders."""
    lines = []
    for field in RESUME_FIELDS:
        aliases = "".join(f", {{{alias}}}" for alias in FIELD_ALIASES.get(field, ()))
        lines.append(
            f"{{{{{field}}}}} or {{{field}}}{aliases} - {FIELD_DESCRIPTIONS[field]}"
        )
    lines.append("{{date}} or {date} - Current date")
    return lines
