"""String helpers shared by the roster assembly."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["normalize_region", "organization_short_code"]

STOP_WORDS = frozenset(
    {"DE", "DEL", "LA", "EL", "LOS", "LAS", "Y", "E", "A", "EN", "POR", "PARA"}
)
SHORT_CODE_LENGTH = 4


def normalize_region(value: object) -> str:
    """Uppercase ``value`` and strip its diacritics (``"Áncash"`` -> ``"ANCASH"``).

    Total over any input: ``None`` and empty strings normalise to ``""``.
    """

    if value is None:
        return ""
    text = unicodedata.normalize("NFKD", str(value).upper())
    text = "".join(c for c in text if not unicodedata.combining(c))
    return re.sub(r"\s+", " ", text).strip()


def organization_short_code(name: str | None) -> str:
    """Build the initials used as a short code for an organization name."""

    words = [
        word
        for word in (name or "").strip().upper().split()
        if len(word) > 1 and word not in STOP_WORDS
    ]
    return "".join(word[0] for word in words[:SHORT_CODE_LENGTH])
