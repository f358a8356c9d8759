from abc import ABC, abstractmethod

from services.parser.models import ExtractionResult


class ResumeExtractor(ABC):
    """Strategy that turns decoded resume text into an ExtractionResult."""

    @abstractmethod
    async def extract(self, text: str) -> ExtractionResult:
        """Extract a record and confidence map from resume text.

        Implementations never raise on malformed text; the worst case is an
        all-empty record.
        """
        pass
