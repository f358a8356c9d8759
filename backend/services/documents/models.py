"""Data models for uploaded documents."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FileType(Enum):
    """Supported file types for decoding."""
    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    TXT = "txt"


@dataclass(frozen=True)
class DocumentFile:
    """An uploaded file: its original name and raw bytes."""
    filename: str
    content: bytes = field(repr=False)

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower().lstrip(".")

    @property
    def stem(self) -> str:
        return Path(self.filename).stem

    @classmethod
    def from_path(cls, file_path: str) -> "DocumentFile":
        path = Path(file_path)
        return cls(filename=path.name, content=path.read_bytes())
