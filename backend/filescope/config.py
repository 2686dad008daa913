"""
FileScope Application Configuration

Configuration management using pydantic-settings.
Values are loaded from environment variables or a local .env file.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from filescope.utils.constants import (
    APP_NAME,
    APP_VERSION,
    MAX_FILE_SIZE_MB,
    MIN_STRING_LENGTH,
    MAX_TEXT_CONTENT_CHARS,
    HIGH_ENTROPY_THRESHOLD,
    CLASSIFIER_TEXT_PREVIEW_CHARS,
    SUSPICIOUS_KEYWORDS,
    SCRIPT_EXTENSIONS,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables
    2. .env file (local development)
    3. Default values defined here

    List values (keywords, extensions) are read from the environment as JSON
    arrays, e.g. ``SCRIPT_EXTENSIONS='[".js", ".ps1"]'``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # =========================================================================
    # Limits
    # =========================================================================
    max_file_size_mb: int = Field(default=MAX_FILE_SIZE_MB, gt=0)

    # =========================================================================
    # Static analysis engine
    # =========================================================================
    min_string_length: int = Field(default=MIN_STRING_LENGTH, ge=1)
    max_text_content_chars: int = Field(default=MAX_TEXT_CONTENT_CHARS, ge=0)
    suspicious_keywords: List[str] = Field(default_factory=lambda: list(SUSPICIOUS_KEYWORDS))
    script_extensions: List[str] = Field(default_factory=lambda: sorted(SCRIPT_EXTENSIONS))

    # =========================================================================
    # Classifier hand-off
    # =========================================================================
    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD
    classifier_text_preview_chars: int = Field(default=CLASSIFIER_TEXT_PREVIEW_CHARS, ge=0)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached to avoid re-reading environment on every access.
    Use get_settings.cache_clear() to reload settings.
    """
    return Settings()
