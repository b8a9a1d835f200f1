"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from datetime import date, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AISettings(BaseSettings):
    """Remote generation settings."""

    model_config = SettingsConfigDict(
        env_prefix="LUCKY_AI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Empty key means remote generation is not configured
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "LUCKY_AI_GEMINI_API_KEY"),
    )

    # Model names
    fortune_model: str = "gemini-2.5-flash"
    chat_model: str = "gemini-2.5-flash"

    timeout: float = 30.0
    temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    max_output_tokens: int = 8192

    # Directory for per-generation JSON logs; empty disables them
    log_dir: str = ""


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LUCKY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # "Today" is a calendar day in this timezone
    timezone: str = "Asia/Shanghai"

    # Link appended to share text
    share_url: str = ""

    ai: AISettings = Field(default_factory=AISettings)

    def today(self) -> date:
        """Current calendar day in the configured timezone."""
        return datetime.now(ZoneInfo(self.timezone)).date()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
