"""
Cost item model unifying flight options, transport items and lodging stays.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
import enum

from app.models.split import Split


class CostItemKind(str, enum.Enum):
    """Kind of record a cost item was taken from."""
    FLIGHT_OPTION = "FLIGHT_OPTION"
    TRANSPORT_ITEM = "TRANSPORT_ITEM"
    LODGING_STAY = "LODGING_STAY"


@dataclass(frozen=True)
class CostItem:
    """A priced trip expense eligible for splitting."""
    id: str
    amount: Decimal  # Trip currency
    split: Optional[Split] = None
    kind: Optional[CostItemKind] = None
