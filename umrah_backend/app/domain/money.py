"""
Money helpers.

All monetary values are Decimals with two fractional digits; every amount is
passed through to_money() before it is persisted.
"""

from decimal import Decimal, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce int/str/float/Decimal to a 2dp Decimal (half-up)."""
    if value is None:
        value = "0.00"
    return Decimal(str(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
