"""
Notebooks API — Application Configuration
==========================================

What:  Environment-driven settings loaded through pydantic-settings.
How:   Values come from environment variables or a `.env` file, are
       type-checked on import and exposed through the `settings` singleton.
Who:   Imported by main.py, the service loader and the middleware.

Service wiring:
    USER_SERVICE and NOTEBOOK_SERVICE name the concrete implementations as
    "package.module:attribute". The attribute is a class or a zero-argument
    factory returning the service instance. Both may stay empty when the
    services are passed to create_app() directly (tests, embedding).
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings, grouped by concern."""

    # ── Services ──────────────────────────────────────────────────────────
    user_service: str = Field(
        default="",
        description="Import path of the UserService implementation",
    )
    notebook_service: str = Field(
        default="",
        description="Import path of the NotebookService implementation",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list of allowed origins
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits CORS_ORIGINS into the list CORSMiddleware expects."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-cases LOG_LEVEL and rejects names logging does not define."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
