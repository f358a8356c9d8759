from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # LLM Configuration (optional remote extraction)
    llm_provider: Literal["openai", "claude"] = "openai"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str = ""
    claude_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"

    # LLM Parameters
    llm_temperature: float = 0.1
    llm_max_tokens: int = 2000
    llm_timeout: int = 30

    # Extraction Settings
    extraction_mode: Literal["local", "remote"] = "local"

    # Template Settings
    date_format: str = "%m/%d/%Y"

    # Session Settings
    session_timeout_minutes: int = 60

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
