"""Configuration management for Docshelf."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Documentation tree: <docs_root>/<category>/[<subcategory>/...]/<file>.md(x)
    docs_root: Path = Path("./docs")

    # HTTP adapter
    api_host: str = "127.0.0.1"
    api_port: int = 1234

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    # Shows full stack traces in error responses
    debug: bool = False

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name so "debug" and "DEBUG" behave the same."""
        return value.strip().upper()


# Global settings instance
settings = Settings()
