"""Input sanitizer: currency markers and whitespace noise out, everything else in."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from rupiahfmt.core.types import RawAmount

_CURRENCY_MARKER_RE = re.compile(r"rp\.?", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def _to_text(value: RawAmount) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f") if value.is_finite() else str(value)
    if isinstance(value, float) and math.isfinite(value):
        # str() switches to exponent notation ("1e+16", "1e-05")
        return format(Decimal(repr(value)), "f")
    return str(value)


def sanitize(value: RawAmount) -> str:
    """Return ``value`` as text without "Rp"/"Rp." markers, whitespace or underscores.

    ``None`` and blank input give ``""``. Separators and any other
    characters are left for the disambiguation step.
    """
    text = _to_text(value).strip()
    if not text:
        return ""

    text = _CURRENCY_MARKER_RE.sub("", text)
    text = _WHITESPACE_RE.sub("", text)
    return text.replace("_", "")
