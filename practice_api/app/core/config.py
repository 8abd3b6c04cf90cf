"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box for classroom use; override them via
environment variables when deploying.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Practice Data API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  Console logging is always enabled;
    # the file handler is only attached when this is non-empty.
    log_file: str = os.getenv("LOG_FILE", "")

    # Mount point of the resource routers, e.g. ``/api/cities``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Upper bound accepted for the ``limit`` query parameter.
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
