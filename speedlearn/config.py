"""Application configuration settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_PASSAGES_FILE = Path(__file__).resolve().parent / "data" / "passages.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "SpeedLearn"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Reading
    default_wpm: int = Field(300, ge=100, le=1500)

    # Passage catalog (JSON); empty catalog when set to None
    passages_file: Path | None = BUNDLED_PASSAGES_FILE

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
