# backend/modules/analytics/utils/money.py

"""
Decimal helpers shared by the analytics calculators.

Accumulation stays unrounded; values are quantized to two places only when
a result model is built.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int]

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO_PLACES = Decimal("0.01")


def round_money(value: Number) -> Decimal:
    """Quantize to cents, half away from zero"""
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def safe_divide(numerator: Number, denominator: Number) -> Decimal:
    """Division that yields 0 for a zero denominator"""
    if not denominator:
        return ZERO
    return Decimal(numerator) / Decimal(denominator)


def percentage_of(part: Number, whole: Number) -> Decimal:
    return round_money(safe_divide(part, whole) * HUNDRED)


def growth_rate(current: Number, previous: Number) -> Decimal:
    """
    Relative change in percent.

    A zero baseline reports no measurable growth (0) rather than an
    infinite or undefined value.
    """
    if not previous:
        return round_money(ZERO)
    return round_money(
        (Decimal(current) - Decimal(previous)) / Decimal(previous) * HUNDRED
    )
