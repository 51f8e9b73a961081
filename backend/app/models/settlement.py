"""
Derived balance and settlement results.

Nothing here is persisted; every value is recomputed from the cost items
each time balances are requested.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class ParticipantBalance:
    """Net position of one participant across all split cost items."""
    participant_id: str
    participant_name: str
    paid: Decimal
    owed: Decimal
    balance: Decimal  # paid - owed


@dataclass(frozen=True)
class Settlement:
    """A suggested transfer from a debtor to a creditor."""
    from_participant_id: str
    to_participant_id: str
    from_name: str
    to_name: str
    amount: Decimal  # Rounded to cents


@dataclass(frozen=True)
class TripSettlement:
    """Balances, transfers and printable summary for one trip."""
    currency: str
    cost_item_count: int
    total_paid: Decimal
    balances: List[ParticipantBalance] = field(default_factory=list)
    settlements: List[Settlement] = field(default_factory=list)
    summary: str = ""
