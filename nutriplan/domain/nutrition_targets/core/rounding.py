"""Half-away-from-zero rounding.

Python's built-in ``round`` uses banker's rounding (``round(0.5) == 0``),
which would shift published targets by one unit on exact halves.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Example:
        >>> round_half_away(234.5)
        235
        >>> round_half_away(-2.5)
        -3
    """
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_to(value: float, ndigits: int) -> float:
    """Round to ``ndigits`` decimal places, halves away from zero.

    Example:
        >>> round_to(500 * 7 / 7700, 2)
        0.45
    """
    exponent = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))
