"""rupiahfmt exception hierarchy."""

from __future__ import annotations


class RupiahFmtError(Exception):
    """Base exception for all rupiahfmt errors."""


class ConfigurationError(RupiahFmtError):
    """Settings failed validation."""


class InvalidAmountError(RupiahFmtError):
    """An edited amount is not a plain grouped integer."""

    def __init__(self, value: str, message: str = "only digits are allowed") -> None:
        self.value = value
        super().__init__(f"Invalid amount {value!r}: {message}")
