"""Resume extraction strategies.

Usage:
    from services.extraction import get_resume_extractor

    extractor = get_resume_extractor("remote")
    result = await extractor.extract(text)
"""

import logging
from typing import Optional

from config import get_settings
from services.llm import LLMFactory
from services.extraction.base import ResumeExtractor
from services.extraction.local import LocalResumeExtractor
from services.extraction.remote import (
    RemoteExtractionError,
    RemoteResumeExtractor,
    parse_llm_reply,
)


logger = logging.getLogger(__name__)


def get_resume_extractor(mode: Optional[str] = None) -> ResumeExtractor:
    """Select an extraction strategy.

    Args:
        mode: "local" or "remote" (uses settings default if not provided).

    Returns:
        The remote extractor when requested and a provider can be built,
        otherwise the local extractor.
    """
    settings = get_settings()
    mode = mode or settings.extraction_mode
    if mode != "remote":
        return LocalResumeExtractor()

    try:
        provider = LLMFactory.create(settings.llm_provider)
    except ValueError as e:
        logger.warning(f"Remote extraction unavailable, using local extractor: {e}")
        return LocalResumeExtractor()
    return RemoteResumeExtractor(provider)


__all__ = [
    "ResumeExtractor",
    "LocalResumeExtractor",
    "RemoteResumeExtractor",
    "RemoteExtractionError",
    "parse_llm_reply",
    "get_resume_extractor",
]
