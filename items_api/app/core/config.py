"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so that the API can be
started locally without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Items API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs go to the console only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Storage adapter used by ``create_app``: ``memory`` or ``sqlite``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory").lower()

    # Path of the SQLite database file.  Relative paths are resolved
    # against the project root by ``get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "items.db")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Environment variables must be set before this module is imported.
settings = Settings()
