"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts without any configuration; in a deployment override
them via environment variables (``PORT`` is the one most hosts set).
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Clean Slate API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by CORS.  The default
    # ``*`` lets the front‑end be hosted anywhere.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Directory with the dashboard and participant tool pages.  It is
    # mounted at ``/`` only when it exists, so the API runs fine
    # without a front‑end checkout.
    static_dir: str = os.getenv("STATIC_DIR", "public")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
