"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to the project root (2 levels up from this file)
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent
_PROJECT_ROOT = _PACKAGE_ROOT.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_PAINT_DATA_PATH = _PACKAGE_ROOT / "data" / "paints.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Reference dataset
    paint_data_path: Path = Field(
        default=DEFAULT_PAINT_DATA_PATH, validation_alias="PAINT_DATA_PATH"
    )

    # Wizard timing
    analysis_delay_seconds: float = Field(
        default=1.5, validation_alias="ANALYSIS_DELAY_SECONDS"
    )
    suggestion_hide_delay: float = Field(
        default=0.15, validation_alias="SUGGESTION_HIDE_DELAY"
    )

    # Session store
    session_ttl_seconds: int = Field(default=3600, validation_alias="SESSION_TTL_SECONDS")
    session_max_count: int = Field(default=1024, validation_alias="SESSION_MAX_COUNT")

    # API settings
    allowed_origins: list[str] = Field(
        default=["*"],
        validation_alias="ALLOWED_ORIGINS",
    )
    rate_limit_analysis: str = Field(
        default="30/minute", validation_alias="RATE_LIMIT_ANALYSIS"
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def cors_origins(self) -> list[str]:
        """Parse ALLOWED_ORIGINS from comma-separated string or return list."""
        if isinstance(self.allowed_origins, str):
            return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return self.allowed_origins


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def validate_settings() -> None:
    """Validate that timing and session settings are usable."""
    settings = get_settings()
    errors = []

    if settings.analysis_delay_seconds < 0:
        errors.append("ANALYSIS_DELAY_SECONDS must not be negative")
    if settings.suggestion_hide_delay < 0:
        errors.append("SUGGESTION_HIDE_DELAY must not be negative")
    if settings.session_ttl_seconds <= 0:
        errors.append("SESSION_TTL_SECONDS must be positive")
    if settings.session_max_count <= 0:
        errors.append("SESSION_MAX_COUNT must be positive")

    if errors:
        raise ValueError(f"Configuration errors: {'; '.join(errors)}")
