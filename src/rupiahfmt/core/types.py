"""Type aliases used across rupiahfmt."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

RawAmount = Union[str, int, float, Decimal, None]
IntegerString = str  # ^[0-9]+$, "0" when no digit survived
DisplayString = str
