from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Guidelines source: explicit markdown file, overrides project/builtin lookup
    GUIDEBOOK_SOURCE: str = ""

    # Project-local directory searched for guidelines.md
    GUIDEBOOK_PROJECT_DIR: str = ".guidebook"

    # Output mode for progress messages
    GUIDEBOOK_OUTPUT: Literal["rich", "plain"] = "rich"

    # Loads from .env file automatically
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Private singleton instance
_settings = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton.

    Raises:
        pydantic.ValidationError: If an environment variable has an invalid value
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
