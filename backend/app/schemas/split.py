"""
Pydantic schemas for Split entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal
from app.models.split import Split, SplitMode


class SplitAllocationIn(BaseModel):
    """Schema for one participant's custom share."""
    participant_id: str
    amount: Decimal


class SplitIn(BaseModel):
    """Schema for a split attached to a cost item."""
    paid_by_participant_id: str
    split_mode: SplitMode = SplitMode.EQUAL
    participant_ids: List[str] = []  # Participants who share this cost
    allocations: List[SplitAllocationIn] = []  # Only used for CUSTOM splits

    def to_split(self) -> Split:
        """Convert to the domain split."""
        allocations = {}
        if self.split_mode == SplitMode.CUSTOM:
            for allocation in self.allocations:
                allocations[allocation.participant_id] = (
                    allocations.get(allocation.participant_id, Decimal(0)) + allocation.amount
                )
        return Split(
            paid_by_participant_id=self.paid_by_participant_id,
            split_mode=self.split_mode,
            participant_ids=tuple(self.participant_ids),
            allocations=allocations
        )


class SplitPreviewRequest(BaseModel):
    """Schema for checking a split before it is saved."""
    amount: Decimal = Field(..., ge=0)
    split: SplitIn
    trip_participant_ids: Optional[List[str]] = None


class SplitShare(BaseModel):
    """Schema for one participant's share of a cost item."""
    participant_id: str
    amount: Decimal  # Rounded to cents for display


class SplitPreviewResponse(BaseModel):
    """Schema for split preview response."""
    amount: Decimal
    split_mode: SplitMode
    shares: List[SplitShare]
