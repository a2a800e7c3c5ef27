"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Notes
    notes_directory: Path

    # Database
    database_url: str = "sqlite:///semnotes.db"

    # OpenAI
    openai_api_key: str = ""

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000

    log_level: str = "INFO"

    @field_validator("notes_directory")
    @classmethod
    def expand_notes_directory(cls, v: Path) -> Path:
        """Make the notes directory absolute.

        Existence is checked by the indexer on every run, not here, so a
        missing directory surfaces as a ConfigurationError at index time.
        """
        return v.expanduser().absolute()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
