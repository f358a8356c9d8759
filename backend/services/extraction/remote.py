"""LLM-backed resume extraction with local fallback."""

import asyncio
import json
import logging
import re
from typing import Any, Optional

from models.resume import ResumeRecord
from services.llm.base import LLMMessage, LLMProvider
from services.llm.prompts import EXTRACT_RESUME_SYSTEM_PROMPT, EXTRACT_RESUME_USER_PROMPT
from services.parser.confidence import score_record
from services.parser.models import ExtractionMethod, ExtractionResult
from services.extraction.base import ResumeExtractor
from services.extraction.local import LocalResumeExtractor


logger = logging.getLogger(__name__)

_JSON_FINDER = re.compile(r"\{.*\}", re.DOTALL)


class RemoteExtractionError(RuntimeError):
    """The LLM call failed or its reply was not a usable JSON object."""


def parse_llm_reply(reply: str) -> dict[str, Any]:
    """Parse the JSON object out of an LLM reply.

    Handles markdown code fences and leading/trailing chatter around the
    object.

    Raises:
        RemoteExtractionError: If no JSON object can be parsed.
    """
    content = (reply or "").strip()
    if content.startswith("```"):
        lines = content.split("\n")
        content = "\n".join(lines[1:-1]) if lines[-1].strip().startswith("```") else "\n".join(lines[1:])

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        match = _JSON_FINDER.search(content)
        if not match:
            raise RemoteExtractionError("LLM reply did not contain a JSON object")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise RemoteExtractionError(f"LLM reply was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise RemoteExtractionError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class RemoteResumeExtractor(ResumeExtractor):
    """Extraction delegated to an LLM provider.

    Any failure (provider error, timeout, unparseable reply) is logged and
    answered by the local heuristic extractor instead, so a third-party
    outage never blocks an upload.
    """

    def __init__(
        self,
        provider: LLMProvider,
        fallback: Optional[ResumeExtractor] = None,
        timeout: Optional[float] = None,
    ):
        self.provider = provider
        self.fallback = fallback or LocalResumeExtractor()
        self.timeout = timeout if timeout is not None else provider.config.timeout

    def _build_messages(self, text: str) -> list[LLMMessage]:
        return [
            LLMMessage(role="system", content=EXTRACT_RESUME_SYSTEM_PROMPT),
            LLMMessage(role="user", content=EXTRACT_RESUME_USER_PROMPT.format(resume_text=text)),
        ]

    async def extract_remote(self, text: str) -> ExtractionResult:
        """Call the provider once, without fallback.

        Raises:
            RemoteExtractionError: On any provider, timeout or parse failure.
        """
        try:
            reply, usage = await asyncio.wait_for(
                self.provider.generate_with_usage(self._build_messages(text)),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise RemoteExtractionError(f"LLM request timed out after {self.timeout}s") from e
        except Exception as e:
            raise RemoteExtractionError(f"LLM request failed: {e}") from e

        logger.info(f"Remote extraction used {usage.get('total_tokens', 0)} tokens")
        record = ResumeRecord.from_partial(parse_llm_reply(reply))
        return ExtractionResult(
            record=record,
            confidence=score_record(record),
            method=ExtractionMethod.REMOTE,
        )

    async def extract(self, text: str) -> ExtractionResult:
        if not isinstance(text, str):
            raise TypeError(f"Resume text must be str, not {type(text).__name__}")
        try:
            return await self.extract_remote(text)
        except RemoteExtractionError as e:
            logger.warning(f"Remote extraction failed, using local extractor: {e}")
            return await self.fallback.extract(text)
