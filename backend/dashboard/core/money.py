"""Money Conversion — dollars <-> integer cents.

Invariants:
    - Persisted amounts are always int cents
    - dollars_to_cents rounds half-up on the exact decimal value (no float drift)
    - cents_to_dollars is the inverse for every whole-cent amount
    - Amounts up to MAX_DOLLARS fit the stored column; validation rejects larger ones
"""

from decimal import Decimal, ROUND_HALF_UP

from dashboard.core.domain_types import Cents

_CENT = Decimal("1")

# invoices.amount is a 32-bit INTEGER column
MAX_CENTS = 2_147_483_647
MAX_DOLLARS = Decimal(MAX_CENTS) / 100


def dollars_to_cents(amount: Decimal | int | float | str) -> Cents:
    """Convert a dollar amount to whole cents, rounding half-up."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return Cents(int((value * 100).quantize(_CENT, rounding=ROUND_HALF_UP)))


def cents_to_dollars(cents: int) -> float:
    """Convert stored cents back to a dollar value for edit forms."""
    return cents / 100
