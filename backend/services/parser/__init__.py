"""Resume Parser Module

Heuristic field extraction from decoded resume text.

Components:
    - contact: Name, email, phone and location extraction
    - links: Website and LinkedIn extraction
    - sections: Section detection for free-text fields
    - skills: Skills section or known-skill dictionary scan
    - confidence: Per-field confidence scoring
    - parser: Main parser facade

Usage:
    from services.parser import ResumeParser, extract_resume

    # Using the class-based API
    parser = ResumeParser()
    result = parser.parse_text(text)
    print(result.record.name)
    print(result.confidence["name"])

    # Using the function API
    record, confidence = extract_resume(text)
"""

from .models import ExtractionMethod, ExtractionResult

from .contact import (
    extract_email,
    extract_phone,
    extract_name,
    extract_location,
)

from .links import extract_website, extract_linkedin, normalize_url

from .skills import KNOWN_SKILLS, extract_skills, find_known_skills

from .sections import (
    SECTION_KEYWORDS,
    SECTION_MAX_LENGTH,
    extract_section,
    extract_field_section,
    extract_summary,
    extract_experience,
    extract_education,
    extract_projects,
    extract_certifications,
    extract_languages,
    extract_achievements,
    extract_references,
    looks_like_section_header,
)

from .confidence import score_field, score_record, needs_attention

from .parser import (
    FIELD_EXTRACTORS,
    ResumeParser,
    extract_resume,
    parse_resume_text,
)


__all__ = [
    # Models
    "ExtractionMethod",
    "ExtractionResult",
    # Main parser
    "FIELD_EXTRACTORS",
    "ResumeParser",
    "extract_resume",
    "parse_resume_text",
    # Individual extractors
    "extract_email",
    "extract_phone",
    "extract_name",
    "extract_location",
    "extract_website",
    "extract_linkedin",
    "normalize_url",
    "KNOWN_SKILLS",
    "extract_skills",
    "find_known_skills",
    "SECTION_KEYWORDS",
    "SECTION_MAX_LENGTH",
    "extract_section",
    "extract_field_section",
    "extract_summary",
    "extract_experience",
    "extract_education",
    "extract_projects",
    "extract_certifications",
    "extract_languages",
    "extract_achievements",
    "extract_references",
    "looks_like_section_header",
    # Confidence
    "score_field",
    "score_record",
    "needs_attention",
]
