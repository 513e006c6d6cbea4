"""Display formatters built on the canonical integer string."""

from __future__ import annotations

import re

from rupiahfmt.core.config import FormatConfig
from rupiahfmt.core.types import DisplayString, RawAmount
from rupiahfmt.normalize.integer import ZERO, normalize_to_integer_string

# Fixed; never read from locale or settings.
THOUSANDS_SEPARATOR = "."
CURRENCY_PREFIX = "Rp."

_GROUP_BOUNDARY_RE = re.compile(r"\B(?=(?:[0-9]{3})+(?![0-9]))")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def group_thousands(digits: str, separator: str = THOUSANDS_SEPARATOR) -> str:
    """Insert ``separator`` every three digits counted from the right."""
    return _GROUP_BOUNDARY_RE.sub(lambda _match: separator, digits)


def format_thousands_id(value: RawAmount) -> DisplayString:
    """Format ``value`` as dot-grouped integer, e.g. ``"2.700.000"``."""
    digits = normalize_to_integer_string(value)
    if digits == ZERO:
        return ZERO
    return group_thousands(digits)


def format_rupiah_no_decimal(value: RawAmount) -> DisplayString:
    """Format ``value`` as ``"Rp. 2.700.000"``."""
    return f"{CURRENCY_PREFIX} {format_thousands_id(value)}"


def format_amount_input(text: str | None) -> DisplayString:
    """Regroup an amount field while it is being typed.

    Every non-digit is dropped first, so separators the user typed are
    ignored. An input with no digits stays empty instead of becoming "0".
    """
    digits = _NON_DIGIT_RE.sub("", text or "")
    if not digits:
        return ""
    return format_thousands_id(digits)


class AmountFormatter:
    """Formatter whose prefix and separator come from FormatConfig."""

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config = config or FormatConfig()

    def thousands(self, value: RawAmount) -> DisplayString:
        digits = normalize_to_integer_string(value)
        if digits == ZERO:
            return ZERO
        return group_thousands(digits, self.config.grouping_separator)

    def currency(self, value: RawAmount) -> DisplayString:
        return f"{self.config.currency_prefix} {self.thousands(value)}"
