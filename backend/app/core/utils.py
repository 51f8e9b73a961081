"""
Utility functions for the application.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")


def round_to_cents(amount: Union[Decimal, int, float]) -> Decimal:
    """Round a money amount to 2 decimals, halves away from zero."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal, currency: str, signed: bool = False) -> str:
    """Format an amount with its currency code, e.g. '12.50 EUR'."""
    rounded = round_to_cents(amount)
    if rounded == 0:
        rounded = abs(rounded)  # no "-0.00"
    if signed:
        return f"{rounded:+.2f} {currency}"
    return f"{rounded:.2f} {currency}"
