"""Document Decoder

Turns uploaded PDF, DOCX/DOC and TXT files into plain text (or, for Word
templates, lightweight HTML).

Usage:
    from services.documents import DocumentFile, decode

    text = decode(DocumentFile("resume.pdf", pdf_bytes))
    html = decode(DocumentFile("template.docx", docx_bytes), as_html=True)
"""

from .models import FileType, DocumentFile

from .exceptions import (
    DocumentError,
    UnsupportedFormatError,
    EmptyDocumentError,
    DecodeFailureError,
)

from .readers import (
    detect_file_type,
    decode,
    decode_path,
    extract_text_from_pdf,
    extract_text_from_docx,
    extract_html_from_docx,
    extract_text_from_txt,
)


__all__ = [
    # Models
    "FileType",
    "DocumentFile",
    # Errors
    "DocumentError",
    "UnsupportedFormatError",
    "EmptyDocumentError",
    "DecodeFailureError",
    # Readers
    "detect_file_type",
    "decode",
    "decode_path",
    "extract_text_from_pdf",
    "extract_text_from_docx",
    "extract_html_from_docx",
    "extract_text_from_txt",
]
