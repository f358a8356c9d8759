from abc import ABC, abstractmethod
from pydantic import BaseModel


class LLMMessage(BaseModel):
    """A message in the LLM conversation."""
    role: str  # "system", "user", "assistant"
    content: str


class LLMConfig(BaseModel):
    """Configuration for LLM provider."""
    model: str
    temperature: float = 0.1
    max_tokens: int = 2000
    timeout: int = 30
    base_url: str = ""


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, api_key: str, config: LLMConfig):
        self.api_key = api_key
        self.config = config

    @abstractmethod
    async def generate(self, messages: list[LLMMessage]) -> str:
        """Generate a text response from the LLM.

        Args:
            messages: List of conversation messages.

        Returns:
            Generated text response.
        """
        pass

    def _format_messages(self, messages: list[LLMMessage]) -> list[dict]:
        """Convert LLMMessage objects to provider-specific format."""
        return [{"role": m.role, "content": m.content} for m in messages]

    @abstractmethod
    async def generate_with_usage(self, messages: list[LLMMessage]) -> tuple[str, dict]:
        """Generate response and return usage info.

        Returns:
            Tuple of (response_text, usage_dict) where usage_dict contains:
            - input_tokens: int
            - output_tokens: int
            - total_tokens: int
        """
        pass
