"""Normalize free-form rupiah amounts and render them for display."""

from __future__ import annotations

from rupiahfmt.formatting.display import (
    AmountFormatter,
    format_amount_input,
    format_rupiah_no_decimal,
    format_thousands_id,
)
from rupiahfmt.normalize.integer import (
    clean_edited_amount,
    normalize_to_integer_string,
    parse_amount,
)
from rupiahfmt.normalize.sanitize import sanitize

__all__ = [
    "AmountFormatter",
    "clean_edited_amount",
    "format_amount_input",
    "format_rupiah_no_decimal",
    "format_thousands_id",
    "normalize_to_integer_string",
    "parse_amount",
    "sanitize",
]
