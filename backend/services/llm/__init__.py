"""LLM providers used by the remote resume extraction strategy."""

from services.llm.base import LLMProvider, LLMMessage, LLMConfig
from services.llm.factory import LLMFactory
from services.llm.prompts import EXTRACT_RESUME_SYSTEM_PROMPT, EXTRACT_RESUME_USER_PROMPT

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMConfig",
    "LLMFactory",
    "EXTRACT_RESUME_SYSTEM_PROMPT",
    "EXTRACT_RESUME_USER_PROMPT",
]
