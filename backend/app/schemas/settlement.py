"""
Pydantic schemas for balances and settlements.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal
from app.models.cost_item import CostItem, CostItemKind
from app.models.participant import Participant
from app.models.settlement import ParticipantBalance
from app.schemas.split import SplitIn


class ParticipantIn(BaseModel):
    """Schema for a trip participant."""
    id: str
    name: str

    def to_participant(self) -> Participant:
        return Participant(id=self.id, name=self.name)


class CostItemBase(BaseModel):
    """Fields shared by every kind of cost item."""
    id: str
    amount: Decimal = Field(..., ge=0)  # In trip's currency
    split: Optional[SplitIn] = None

    def to_cost_item(self, kind: Optional[CostItemKind] = None) -> CostItem:
        """Convert to the domain cost item."""
        return CostItem(
            id=self.id,
            amount=self.amount,
            split=self.split.to_split() if self.split else None,
            kind=kind
        )


class CostItemIn(CostItemBase):
    """Schema for a cost item already selected for splitting."""
    kind: Optional[CostItemKind] = None


class BalanceRequest(BaseModel):
    """Schema for balance calculation request."""
    participants: List[ParticipantIn]
    cost_items: List[CostItemIn] = []


class ParticipantBalanceIn(BaseModel):
    """Schema for a balance submitted for settlement."""
    participant_id: str
    participant_name: str
    paid: Decimal = Decimal(0)
    owed: Decimal = Decimal(0)
    balance: Decimal

    def to_balance(self) -> ParticipantBalance:
        return ParticipantBalance(
            participant_id=self.participant_id,
            participant_name=self.participant_name,
            paid=self.paid,
            owed=self.owed,
            balance=self.balance
        )


class ParticipantBalanceResponse(BaseModel):
    """Schema for participant balance response."""
    participant_id: str
    participant_name: str
    paid: Decimal
    owed: Decimal
    balance: Decimal  # paid - owed; positive = should receive
    
    class Config:
        from_attributes = True


class SettlementResponse(BaseModel):
    """Schema for a single transfer in settlement."""
    from_participant_id: str
    from_name: str
    to_participant_id: str
    to_name: str
    amount: Decimal  # Transfer amount in trip's currency
    
    class Config:
        from_attributes = True
