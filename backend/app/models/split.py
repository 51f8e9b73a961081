"""
Split model describing who paid a cost item and who shares it.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Tuple
import enum


class SplitMode(str, enum.Enum):
    """Split mode enumeration."""
    EQUAL = "EQUAL"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class Split:
    """How one cost item's amount is divided among participants."""
    paid_by_participant_id: str
    split_mode: SplitMode
    participant_ids: Tuple[str, ...] = ()
    allocations: Dict[str, Decimal] = field(default_factory=dict)  # CUSTOM only

    @property
    def sharing_participant_ids(self) -> Tuple[str, ...]:
        """Distinct sharing participant ids, in first-seen order."""
        return tuple(dict.fromkeys(self.participant_ids))
