"""Display casing for free-text status labels ("BELUM CT" -> "Belum CT")."""

from __future__ import annotations

import re
from typing import Optional

ACRONYMS = frozenset({"ct", "ut", "ttd", "otw", "boq"})

_WHITESPACE_RE = re.compile(r"\s+")


def _case_word(word: str) -> str:
    lower = word.lower()
    if lower in ACRONYMS:
        return lower.upper()
    return lower[:1].upper() + lower[1:]


def normalize_status_text(value: Optional[str], default: str = "") -> str:
    """Collapse whitespace and title-case ``value``, keeping known acronyms upper.

    Display only; stored values are not rewritten.
    """
    if value is None:
        return default
    cleaned = _WHITESPACE_RE.sub(" ", str(value)).strip()
    if not cleaned:
        return default
    return " ".join(_case_word(word) for word in cleaned.split(" "))
