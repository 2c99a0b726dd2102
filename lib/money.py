# =============================================================================
# lib/money.py - Exact Decimal Arithmetic
# =============================================================================
# Monetary values never go through binary floating point:
#   Decimal("10.10") * Decimal("1.1") == Decimal("11.110")  -> 11.11
#   10.10 * 1.1 == 11.110000000000001                        (float, wrong)
#
# Floats arriving from JSON are converted through their shortest repr
# (str(10.1) == "10.1"), never with Decimal(float).
# =============================================================================

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from app.config import settings


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a scalar to Decimal without float noise.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def quantize(value: Decimal, places: int | None = None) -> Decimal:
    """
    Round to the configured number of decimal places (half up).

    Raises:
        ValueError: If the rounded value has more digits than the decimal
            context can hold (e.g. 1e30 at two places)
    """
    if places is None:
        places = settings.DECIMAL_PLACES
    exponent = Decimal(1).scaleb(-places)
    try:
        return value.quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Too many digits to round: {value!r}")


def scale(value: Decimal | int | float | str, factor: Decimal | int | float | str) -> Decimal:
    """
    Multiply two amounts exactly and round the product once.

    Example:
        scale("10.10", "1.1")  # Decimal("11.11")
    """
    return quantize(to_decimal(value) * to_decimal(factor))
