"""Pydantic field types and display model for raw amounts."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator

from rupiahfmt.formatting.display import format_rupiah_no_decimal, format_thousands_id
from rupiahfmt.normalize.integer import normalize_to_integer_string, parse_amount

# Form/API fields that accept "Rp. 2.700.000", 2700000, None, ...
RupiahAmount = Annotated[int, BeforeValidator(parse_amount)]
IntegerAmountString = Annotated[str, BeforeValidator(normalize_to_integer_string)]


class AmountDisplay(BaseModel):
    """All renderings of one raw amount."""

    raw: Any = None
    canonical: IntegerAmountString = "0"
    value: int = 0
    thousands: str = "0"
    rupiah: str = "Rp. 0"

    model_config = {"frozen": True}

    @classmethod
    def from_raw(cls, raw: Any) -> AmountDisplay:
        canonical = normalize_to_integer_string(raw)
        return cls(
            raw=raw,
            canonical=canonical,
            value=int(canonical),
            thousands=format_thousands_id(canonical),
            rupiah=format_rupiah_no_decimal(canonical),
        )
