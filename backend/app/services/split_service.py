"""
Split service for per-item share calculation and split validation.
"""
from decimal import Decimal
from typing import Dict, Iterable, Optional
import logging
from app.models.split import Split, SplitMode

logger = logging.getLogger(__name__)

# Custom allocations may differ from the item amount by at most this much
ALLOCATION_TOLERANCE = Decimal("0.01")


class SplitValidationError(ValueError):
    """Raised when a split breaks one of the split-editing rules."""
    pass


def split_shares(amount: Decimal, split: Split) -> Dict[str, Decimal]:
    """
    Calculate what each participant owes for a single cost item.

    EQUAL splits divide the amount by the number of distinct sharing
    participants, without rounding. A split with nobody to share it
    yields no shares at all. CUSTOM splits return the allocations as
    given; the item amount is not consulted.
    """
    if split.split_mode == SplitMode.EQUAL:
        participant_ids = split.sharing_participant_ids
        if not participant_ids:
            return {}
        share = amount / len(participant_ids)
        return {participant_id: share for participant_id in participant_ids}

    return dict(split.allocations)


def validate_split(
    amount: Decimal,
    split: Split,
    trip_participant_ids: Optional[Iterable[str]] = None
) -> None:
    """
    Check a split before it is stored.

    Args:
        amount: Amount of the cost item the split belongs to
        split: Split to check
        trip_participant_ids: Participants of the trip. When given, the payer
            and every sharing participant must be among them.

    Raises:
        SplitValidationError: On the first rule the split breaks.
    """
    participant_ids = split.sharing_participant_ids
    if not participant_ids:
        raise SplitValidationError("Select at least one participant to split between")

    if trip_participant_ids is not None:
        known_ids = set(trip_participant_ids)
        if split.paid_by_participant_id not in known_ids:
            raise SplitValidationError(
                f"Payer '{split.paid_by_participant_id}' is not a participant of this trip"
            )
        unknown_ids = [pid for pid in participant_ids if pid not in known_ids]
        if unknown_ids:
            raise SplitValidationError(
                f"Not participants of this trip: {', '.join(unknown_ids)}"
            )

    if split.split_mode == SplitMode.CUSTOM:
        if not split.allocations:
            raise SplitValidationError("Custom split requires an amount for each participant")
        if set(split.allocations) != set(participant_ids):
            raise SplitValidationError(
                "Custom amounts must be given for exactly the selected participants"
            )
        total = sum(split.allocations.values(), Decimal(0))
        if abs(total - amount) > ALLOCATION_TOLERANCE:
            logger.debug(f"Custom allocations total {total} for item amount {amount}")
            raise SplitValidationError(f"Custom amounts must sum to {amount}")
