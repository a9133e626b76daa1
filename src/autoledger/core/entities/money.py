"""Monetary value type and cent rounding."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import PlainSerializer

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Exact decimal in memory, plain JSON number on the wire.
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_currency(value: Decimal | int | float) -> Decimal:
    """Round to whole cents, halves away from zero (1500.555 -> 1500.56)."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
