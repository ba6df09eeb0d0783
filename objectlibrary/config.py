"""
ObjectLibrary configuration.
Single source of truth for storage and service settings.
Every key is optional; the library runs with an empty environment.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SERVICE_TIMEOUT = 60.0


def get_settings():
    """Return library settings, re-read from the environment on every call."""
    return Settings()


class Settings:
    """Library settings loaded from environment."""

    # Storage: root under which per-record-type directories are created
    DATA_DIR: Path

    # Service calls
    SERVICE_TIMEOUT: float = DEFAULT_SERVICE_TIMEOUT
    POKEAPI_BASE_URL: str = "https://pokeapi.co/api/v2"

    def __init__(self):
        data_dir = (os.environ.get("OBJECTLIBRARY_DATA_DIR") or "").strip()
        self.DATA_DIR = Path(data_dir).expanduser() if data_dir else Path.home() / ".objectlibrary"
        self.SERVICE_TIMEOUT = _positive_float(
            os.environ.get("OBJECTLIBRARY_SERVICE_TIMEOUT"), DEFAULT_SERVICE_TIMEOUT
        )
        self.POKEAPI_BASE_URL = (
            os.environ.get("POKEAPI_BASE_URL") or "https://pokeapi.co/api/v2"
        ).strip().rstrip("/")


def _positive_float(value, default: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default
