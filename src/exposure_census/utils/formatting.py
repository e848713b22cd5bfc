from __future__ import annotations

from fractions import Fraction
import math


def _short_decimal(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_aperture(value: float) -> str:
    return _short_decimal(value)


def shutter_seconds_to_fraction(value: float | None, max_denominator: int = 1000000) -> str | None:
    if value is None or not math.isfinite(value):
        return None
    if value <= 0:
        return None
    if value >= 1.0:
        return _short_decimal(value)

    frac = Fraction(value).limit_denominator(max_denominator)
    return f"{frac.numerator}/{frac.denominator}"
