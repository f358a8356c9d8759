"""Prompt templates for remote resume extraction."""

from models.resume import RESUME_FIELDS


RESUME_FIELD_LIST = ", ".join(RESUME_FIELDS)

EXTRACT_RESUME_SYSTEM_PROMPT = f"""You are a professional resume parser. Extract information from resume text and return ONLY a valid JSON object with these exact fields: {RESUME_FIELD_LIST}.

Rules:
- Every value is a plain string; join multi-line sections with newlines
- If a field is not found, return empty string ""
- Do not include any other text or explanations, only the JSON object
"""

EXTRACT_RESUME_USER_PROMPT = """Extract resume information from this text:

{resume_text}
"""
