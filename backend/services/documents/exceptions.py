"""Errors raised while decoding uploaded documents."""

from typing import Optional


class DocumentError(ValueError):
    """Base class for document decoding failures."""

    def __init__(self, message: str, extension: str = ""):
        super().__init__(message)
        self.extension = extension


class UnsupportedFormatError(DocumentError):
    """The file extension is not one of the supported formats."""

    def __init__(self, extension: str):
        super().__init__(f"Unsupported file type: {extension or '(none)'}", extension)


class EmptyDocumentError(DocumentError):
    """Decoding succeeded but produced no text."""

    def __init__(self, extension: str):
        super().__init__(
            f"No text content found in {extension.upper()} file. "
            "The file might be empty or scanned.",
            extension,
        )


class DecodeFailureError(DocumentError):
    """The underlying decoder raised (corrupt archive, encrypted PDF, ...)."""

    def __init__(self, extension: str, cause: Optional[BaseException] = None):
        detail = str(cause) if cause else "Unknown error"
        super().__init__(f"Failed to parse {extension.upper()} file: {detail}", extension)
        self.cause = cause
