"""Main resume parser facade with unified API."""

import logging
from typing import Callable, Dict, Tuple

from models.resume import ConfidenceMap, ResumeRecord
from services.documents import DocumentFile, decode, decode_path

from .models import ExtractionMethod, ExtractionResult
from .contact import extract_email, extract_location, extract_name, extract_phone
from .links import extract_linkedin, extract_website
from .skills import extract_skills
from .sections import (
    extract_achievements,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_languages,
    extract_projects,
    extract_references,
    extract_summary,
)
from .confidence import score_record


logger = logging.getLogger(__name__)


# One extractor per record field; every one returns "" when nothing matches.
FIELD_EXTRACTORS: Dict[str, Callable[[str], str]] = {
    "name": extract_name,
    "email": extract_email,
    "phone": extract_phone,
    "location": extract_location,
    "website": extract_website,
    "linkedin": extract_linkedin,
    "summary": extract_summary,
    "experience": extract_experience,
    "education": extract_education,
    "skills": extract_skills,
    "projects": extract_projects,
    "certifications": extract_certifications,
    "languages": extract_languages,
    "achievements": extract_achievements,
    "references": extract_references,
}


class ResumeParser:
    """Heuristic resume parser.

    Turns decoded resume text into a ResumeRecord and a per-field confidence
    map. Parsing is pure: the same text always yields the same result.

    Usage:
        parser = ResumeParser()
        result = parser.parse_file("resume.pdf")
        print(result.record.email)
        print(result.confidence["skills"])
    """

    def parse_file(self, file_path: str) -> ExtractionResult:
        """Decode a resume file and extract structured data.

        Args:
            file_path: Path to the resume file (PDF, DOCX, DOC or TXT)

        Returns:
            ExtractionResult with the record and confidence map

        Raises:
            UnsupportedFormatError: If file type is not supported
            EmptyDocumentError: If the file holds no text
            DecodeFailureError: If the file cannot be read
        """
        return self.parse_text(decode_path(file_path))

    def parse_document(self, file: DocumentFile) -> ExtractionResult:
        """Decode an in-memory upload and extract structured data."""
        return self.parse_text(decode(file))

    def parse_text(self, text: str) -> ExtractionResult:
        """Parse resume text and extract structured data.

        Args:
            text: Raw resume text

        Returns:
            ExtractionResult with the record and confidence map

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Resume text must be str, not {type(text).__name__}")

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if not text.strip():
            record = ResumeRecord()
        else:
            record = ResumeRecord(
                **{field: extractor(text).strip() for field, extractor in FIELD_EXTRACTORS.items()}
            )

        confidence = score_record(record)
        empty = record.empty_fields()
        logger.debug(f"Extracted resume fields, {len(empty)} empty: {empty}")
        return ExtractionResult(record=record, confidence=confidence, method=ExtractionMethod.LOCAL)


def extract_resume(text: str) -> Tuple[ResumeRecord, ConfidenceMap]:
    """Extract a record and its confidence map from resume text.

    Convenience function over ResumeParser.

    Args:
        text: Raw resume text

    Returns:
        (record, confidence) tuple
    """
    result = ResumeParser().parse_text(text)
    return result.record, result.confidence


def parse_resume_text(text: str) -> dict:
    """Parse resume text and return a dictionary."""
    return ResumeParser().parse_text(text).to_dict()
