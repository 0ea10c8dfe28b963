from __future__ import annotations

from typing import Any


def normalize(value: Any) -> str:
    """Canonical comparison form of a field value: text, trimmed, lowercased.

    Missing values (None) become the empty string.
    """
    if value is None:
        return ""
    return str(value).strip().lower()
