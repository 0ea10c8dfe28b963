from __future__ import annotations

import os
from pathlib import Path

SOURCE_JSON = "json"
SOURCE_DATABASE = "database"
SOURCE_MEMORY = "memory"

_SOURCES = (SOURCE_JSON, SOURCE_DATABASE, SOURCE_MEMORY)

# src/listing_reports/infra/settings.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_LISTINGS_FILE = "data/listings.json"
DEFAULT_LOAD_DELAY_SECONDS = 0.3


def listings_source() -> str:
    source = os.getenv("LISTINGS_SOURCE", SOURCE_JSON).strip().lower()

    if source not in _SOURCES:
        raise RuntimeError(f"LISTINGS_SOURCE must be one of {list(_SOURCES)}, got '{source}'")

    return source


def listings_file() -> Path:
    """LISTINGS_FILE, with relative paths resolved against the project root."""
    path = Path(os.getenv("LISTINGS_FILE") or DEFAULT_LISTINGS_FILE)

    if not path.is_absolute():
        path = PROJECT_ROOT / path

    return path


def load_delay_seconds() -> float:
    raw = os.getenv("LISTINGS_LOAD_DELAY_SECONDS")

    if raw is None or raw == "":
        return DEFAULT_LOAD_DELAY_SECONDS

    try:
        delay = float(raw)
    except ValueError:
        raise RuntimeError(f"LISTINGS_LOAD_DELAY_SECONDS must be a number, got '{raw}'")

    if delay < 0:
        raise RuntimeError("LISTINGS_LOAD_DELAY_SECONDS must be >= 0")

    return delay


def database_url() -> str:
    """Connection URL for the database source and Alembic, e.g. postgresql+psycopg://..."""
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError(
            f"DATABASE_URL environment variable is not set (required when LISTINGS_SOURCE={SOURCE_DATABASE})"
        )

    return url
