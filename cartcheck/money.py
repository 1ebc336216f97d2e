"""
Currency and quantity normalisation.

Prices on the shop are rendered as text such as ``"$10.99"`` or
``"Total: 116.9"``. These helpers turn that text into numbers without
ever raising, so a missing or garbled field degrades to zero.

Rounding is half away from zero at two decimal places, applied to the
shortest decimal representation of the float (``1.005`` -> ``1.01``).
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

# Maximum absolute difference for two currency values to count as equal
CURRENCY_TOLERANCE = 0.01

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_DIGITS = re.compile(r"\s*(\d+)")
_NUMBER_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_CENTS = Decimal("0.01")


def _to_decimal(value: float) -> Decimal:
    return Decimal(repr(float(value)))


def parse_currency(text: str | None) -> float:
    """
    Parse a currency string into a float.

    Every character that is not a digit or a decimal point is dropped,
    then the longest leading number is parsed, so ``"$12.99"``,
    ``"Total: 12.99"`` and ``"$12.99."`` all give 12.99.

    Args:
        text: Raw text read from the page (may be None).

    Returns:
        Parsed value, or 0.0 when nothing parsable remains.
    """
    if not text:
        return 0.0
    match = _NUMBER_PREFIX.match(_NON_NUMERIC.sub("", text))
    if not match:
        return 0.0
    return float(match.group())


def parse_quantity(text: str | None) -> int:
    """
    Parse the leading digits of a quantity field.

    Returns:
        Parsed quantity, or 0 when the text does not start with digits.
    """
    if not text:
        return 0
    match = _LEADING_DIGITS.match(text)
    return int(match.group(1)) if match else 0


def round_currency(value: float) -> float:
    """Round to two decimal places, half away from zero."""
    try:
        return float(_to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # nan / inf cannot be quantized
        return float(value)


def calculate_subtotal(price: float, quantity: int) -> float:
    """Expected line subtotal for ``quantity`` units at ``price``."""
    return round_currency(price * quantity)


def approx_equal(a: float, b: float, epsilon: float = CURRENCY_TOLERANCE) -> bool:
    """
    Check whether two currency values are approximately equal.

    The comparison is strict (``|a - b| < epsilon``) and is made on the
    decimal representation of the operands, so values exactly one
    epsilon apart are never equal.

    Args:
        a: First value.
        b: Second value.
        epsilon: Maximum allowed difference (exclusive).

    Returns:
        True if the values differ by less than epsilon.
    """
    try:
        return abs(_to_decimal(a) - _to_decimal(b)) < _to_decimal(epsilon)
    except InvalidOperation:
        return False


def format_currency(value: float) -> str:
    return f"${round_currency(value):.2f}"
