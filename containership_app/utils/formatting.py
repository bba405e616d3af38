"""
Number formatting shared by report lines and hazard messages.
"""

from __future__ import annotations

import math


def format_number(value: float, ndigits: int = 6) -> str:
    """
    Format a mass or temperature for report output.

    Integral values print without a decimal part (10000, -18), others keep
    their shortest representation after rounding away float noise
    (2500 * 0.05 -> 125, 12.5 -> 12.5).
    """
    number = float(value)
    if not math.isfinite(number):
        return str(number)
    number = round(number, ndigits)
    if number.is_integer():
        return str(int(number))
    return repr(number)
