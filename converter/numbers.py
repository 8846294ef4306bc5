"""
Number handling that reproduces how browsers round and print numbers.

Python's round() and format() round exact ties to even; CSS produced by a
browser rounds them up. These helpers keep the output digit-for-digit equal.
"""

import math
from decimal import Decimal, ROUND_HALF_UP


def js_round(x: float) -> int:
    """Round half toward positive infinity."""
    floor = math.floor(x)
    return floor + 1 if x - floor >= 0.5 else floor


def to_fixed(x: float, digits: int) -> str:
    """Fixed-point text of x, ties rounded away from zero on the exact binary value."""
    if x == 0:
        x = 0.0  # no "-0.00"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(x).quantize(quantum, rounding=ROUND_HALF_UP))


def js_number(x: float) -> str:
    """Shortest text of a number, integral values printed without a fraction."""
    if x == int(x):
        return str(int(x))
    return repr(x)


def pct(x: str) -> float:
    """Convert percentage string to decimal."""
    return float(x.replace("%", "")) / 100
