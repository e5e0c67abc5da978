"""Centralised settings for the recipe scraper backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "8080")))

    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "5.0"))
    )
    min_document_length: int = field(
        default_factory=lambda: int(os.environ.get("MIN_DOCUMENT_LENGTH", "100"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at *level* (``settings.log_level`` by default).

    A no-op when the root logger already has handlers, so test runners and
    uvicorn keep their own configuration.
    """
    logging.basicConfig(level=level or settings.log_level, format=_LOG_FORMAT)


# Module-level singleton — import this everywhere:
#   from backend.config import settings
settings = Settings()
