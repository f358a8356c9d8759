"""Binary document encoders for PDF and DOCX export."""

from abc import ABC, abstractmethod

from models.export import ExportFormat


PLACEHOLDER_CONTENT = b"resume-content-blob"


class BinaryEncoder(ABC):
    """Turns a rendered HTML resume into a binary document."""

    @abstractmethod
    def encode(self, html: str, fmt: ExportFormat) -> bytes:
        """Encode the HTML as the requested binary format.

        Args:
            html: Complete HTML document.
            fmt: ExportFormat.PDF or ExportFormat.DOCX.

        Returns:
            Document bytes.
        """
        pass


class PlaceholderEncoder(BinaryEncoder):
    """Default encoder: returns marker bytes instead of a real document.

    Plug a real encoder into ResumeExporter to produce actual PDF/DOCX files.
    """

    def encode(self, html: str, fmt: ExportFormat) -> bytes:
        return PLACEHOLDER_CONTENT
