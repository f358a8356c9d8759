from typing import Optional

from services.llm.base import LLMProvider, LLMConfig
from services.llm.openai_provider import OpenAIProvider
from services.llm.claude_provider import ClaudeProvider
from config import Settings, get_settings


class LLMFactory:
    """Factory for creating LLM provider instances."""

    _providers: dict[str, type[LLMProvider]] = {
        "openai": OpenAIProvider,
        "claude": ClaudeProvider,
    }

    @staticmethod
    def config_from_settings(provider: str, settings: Settings) -> LLMConfig:
        """Build the provider config from application settings."""
        if provider == "claude":
            model, base_url = settings.claude_model, ""
        else:
            model, base_url = settings.openai_model, settings.openai_base_url
        return LLMConfig(
            model=model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.llm_timeout,
            base_url=base_url,
        )

    @classmethod
    def create(
        cls,
        provider: str,
        api_key: Optional[str] = None,
        config: Optional[LLMConfig] = None,
    ) -> LLMProvider:
        """Create an LLM provider instance.

        Args:
            provider: Provider name ("openai" or "claude").
            api_key: API key (uses settings if not provided).
            config: LLM configuration (uses settings if not provided).

        Returns:
            LLMProvider instance.

        Raises:
            ValueError: If provider is not supported or has no API key.
        """
        if provider not in cls._providers:
            raise ValueError(f"Unsupported provider: {provider}. Supported: {list(cls._providers.keys())}")

        settings = get_settings()

        # Get API key from settings if not provided
        if api_key is None:
            api_key = settings.claude_api_key if provider == "claude" else settings.openai_api_key

        if not api_key or not api_key.strip():
            raise ValueError(f"API key not provided for {provider}")

        if config is None:
            config = cls.config_from_settings(provider, settings)

        provider_class = cls._providers[provider]
        return provider_class(api_key, config)

    @classmethod
    def register(cls, name: str, provider_class: type[LLMProvider]) -> None:
        """Register a new provider class."""
        cls._providers[name] = provider_class
