"""Fixed-point money helpers.

Amounts are persisted as integer cents and handled as ``Decimal`` everywhere
else, so totals never pick up binary floating point drift.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize(amount: Decimal) -> Decimal:
    """Round to whole cents, half away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(amount) -> int:
    """Convert a decimal amount (or its string form) to integer cents."""
    return int(quantize(Decimal(str(amount))) * 100)


def from_cents(cents: int | None) -> Decimal | None:
    if cents is None:
        return None
    return quantize(Decimal(cents) / 100)
