"""Numeric coercion and rounding helpers"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any


def parse_amount(value: Any) -> float:
    """Absolute numeric value of an amount; malformed or non-finite input counts as 0"""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return abs(amount)


def round_half_up(value: float, places: int = 2) -> float:
    """Round the exact binary value half away from zero, like a fixed-point display"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def percent_of(part: float, whole: float, places: int = 1) -> float:
    """part as a percentage of whole (0 when whole is not positive)"""
    if whole <= 0:
        return 0.0
    return round_half_up(part / whole * 100, places)


def format_number(value: float, places: int = 2) -> str:
    """Compact display form: 50.0 -> '50', 12.50 -> '12.5'"""
    text = f"{round_half_up(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_fixed(value: float, places: int = 1) -> str:
    """Fixed-point display form keeping trailing zeros: 30 -> '30.0'"""
    # adding 0.0 turns -0.0 into 0.0
    return f"{round_half_up(value, places) + 0.0:.{places}f}"
