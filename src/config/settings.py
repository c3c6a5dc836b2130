"""Application settings for the repair shop service.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a Pydantic settings object.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_DB_PATH = os.path.join("data", "repairs.sqlite3")
DEFAULT_STORE = "sqlite"
STORE_BACKENDS = ("sqlite", "memory")
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    db_path: str = DEFAULT_DB_PATH
    store_backend: Literal["sqlite", "memory"] = DEFAULT_STORE
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    db_path = os.getenv("REPAIRS_DB_PATH") or DEFAULT_DB_PATH

    store_backend = os.getenv("REPAIRS_STORE", DEFAULT_STORE).strip().lower()
    if store_backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"REPAIRS_STORE must be one of {', '.join(STORE_BACKENDS)}, got {store_backend!r}"
        )

    log_level = os.getenv("REPAIRS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"REPAIRS_LOG_LEVEL is not a valid level name: {log_level!r}")

    return Settings(db_path=db_path, store_backend=store_backend, log_level=log_level)


# Public settings instance
settings = _build_settings()
