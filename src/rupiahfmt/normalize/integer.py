"""Reduce locale-ambiguous money strings to a canonical integer string.

Disambiguation rules, applied to the sanitized text in order:

* both ``.`` and ``,`` present: ``.`` groups thousands, the first ``,`` starts
  the fraction (Indonesian notation);
* only one kind present: if the segment after its last occurrence is one or
  two digits it is a fraction (``2700000.00``, ``2700000,5``), otherwise every
  occurrence groups thousands (``2.700.000``);
* neither present: keep the digits.

The fraction is always dropped. Anything that leaves no digits becomes ``"0"``.
"""

from __future__ import annotations

import logging
import re

from rupiahfmt.core.exceptions import InvalidAmountError
from rupiahfmt.core.types import IntegerString, RawAmount
from rupiahfmt.normalize.sanitize import sanitize

logger = logging.getLogger(__name__)

ZERO: IntegerString = "0"

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_FRACTION_TAIL_RE = re.compile(r"[0-9]{1,2}")
_DIGITS_RE = re.compile(r"[0-9]+")


def _digits_or_zero(text: str) -> IntegerString:
    return _NON_DIGIT_RE.sub("", text) or ZERO


def _split_single_separator(text: str, separator: str) -> tuple[str, str]:
    """Return (integer part, branch name) for text holding only one separator kind."""
    # Everything before the last separator, not just the first group: "1.234.56" -> "1234".
    head, _, tail = text.rpartition(separator)
    if _FRACTION_TAIL_RE.fullmatch(tail):
        return head, "decimal"
    return text, "thousands"


def normalize_to_integer_string(value: RawAmount) -> IntegerString:
    """Return the integer magnitude of ``value`` as a digit-only string.

    Never raises. ``None``, blank and digit-free input all give ``"0"``.

    >>> normalize_to_integer_string("Rp. 2.700.000,50")
    '2700000'
    """
    cleaned = sanitize(value)
    if not cleaned:
        return ZERO

    has_dot = "." in cleaned
    has_comma = "," in cleaned

    if has_dot and has_comma:
        integer_part = cleaned.replace(".", "").split(",", 1)[0]
        branch = "dot-thousands-comma-decimal"
    elif has_dot:
        integer_part, branch = _split_single_separator(cleaned, ".")
        branch = f"dot-{branch}"
    elif has_comma:
        integer_part, branch = _split_single_separator(cleaned, ",")
        branch = f"comma-{branch}"
    else:
        integer_part, branch = cleaned, "plain"

    result = _digits_or_zero(integer_part)
    logger.debug("normalized %r via %s -> %s", value, branch, result)
    return result


def parse_amount(value: RawAmount) -> int:
    """Integer value of :func:`normalize_to_integer_string`; ``0`` for junk."""
    return int(normalize_to_integer_string(value))


def clean_edited_amount(text: str) -> IntegerString:
    """Strip thousands dots from an edited cell value and insist on digits.

    Raises:
        InvalidAmountError: if anything other than digits remains.
    """
    candidate = (text or "").replace(".", "")
    if not _DIGITS_RE.fullmatch(candidate):
        raise InvalidAmountError(text)
    return candidate
