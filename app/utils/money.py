# app/utils/money.py
from decimal import Decimal, ROUND_HALF_UP


def to_fixed(num: float, precision: int = 2) -> float:
    """
    Round to `precision` fractional digits, half away from zero.

    The value is scaled, rounded to an integer and scaled back, so the
    result stays numeric. Going through the shortest repr keeps inputs
    like 19.995 (stored as 19.99499...) on the intended side of the half.
    """
    scale = Decimal(10) ** precision
    scaled = (Decimal(repr(float(num))) * scale).to_integral_value(rounding=ROUND_HALF_UP)
    return float(scaled / scale)
