"""Monetary rounding shared by every simulator."""

import math


def round_currency(value: float) -> float:
    """
    Round a monetary figure or ratio to 2 decimal places, half-up.

    Halves always round toward positive infinity (0.125 -> 0.13, -0.125 -> -0.12),
    so emitted figures keep cent-level parity with existing stored results.
    The scaling by 100 happens in binary floating point, so a value such as
    2.345 (stored as 2.34499...) rounds down.

    Args:
        value: Amount to round

    Returns:
        Amount rounded to cents
    """
    return math.floor(value * 100 + 0.5) / 100
