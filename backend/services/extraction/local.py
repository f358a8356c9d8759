from services.parser import ResumeParser
from services.parser.models import ExtractionResult
from services.extraction.base import ResumeExtractor


class LocalResumeExtractor(ResumeExtractor):
    """Heuristic extraction with no network access."""

    def __init__(self, parser: ResumeParser | None = None):
        self.parser = parser or ResumeParser()

    async def extract(self, text: str) -> ExtractionResult:
        return self.parser.parse_text(text)
