"""
Recordbook — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.

The defaults describe a self-contained local install: records live in
`./records` relative to the working directory, the bundled templates are used,
and the server listens on port 5050.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Templates shipped inside the package
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Record Store ──────────────────────────────────────────────────────
    # What: Directory holding one `<slug>.json` file per record
    # Why relative: Matches a "run it from the project folder" workflow;
    # the directory is created lazily on first listing or save.
    store_root: str = Field(default="records")

    # ── Templates ─────────────────────────────────────────────────────────
    # What: Directory containing index.html, new.html, show.html, edit.html
    templates_dir: str = Field(default=str(DEFAULT_TEMPLATES_DIR))

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5050, ge=1, le=65535)

    # What: Responses smaller than this are sent uncompressed
    gzip_minimum_size: int = Field(default=500, ge=0)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # STORE_ROOT and store_root both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
