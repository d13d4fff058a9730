"""Helpers for Decimal normalization of monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize a stored or user-supplied amount to Decimal.

    Floats go through ``str`` so JSON numbers such as ``499.99`` keep their
    written value instead of their binary approximation.

    Args:
        value: Raw amount from JSON, SQL or a caller.

    Returns:
        Decimal: Normalized amount, zero when the value is missing.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_json_number(value: Decimal) -> int | float:
    """Return an int for whole amounts, else a float, for JSON output."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


__all__ = [
    "coerce_decimal",
    "round_half_up",
    "to_json_number",
]
