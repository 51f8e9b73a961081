"""
Pydantic schemas for Trip snapshots.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from decimal import Decimal
from app.schemas.settlement import (
    CostItemBase, ParticipantIn, ParticipantBalanceResponse, SettlementResponse
)


class FlightOptionIn(CostItemBase):
    """Schema for a flight option."""
    route: Optional[str] = None
    is_selected: bool = False


class TransportItemIn(CostItemBase):
    """Schema for a transport item."""
    label: Optional[str] = None
    is_selected: bool = False


class LodgingStayIn(CostItemBase):
    """Schema for a lodging stay. Lodging is always included."""
    city: Optional[str] = None
    hotel_name: Optional[str] = None


class TripSnapshot(BaseModel):
    """Schema for already-loaded trip data to settle."""
    currency: Optional[str] = None  # Falls back to DEFAULT_CURRENCY
    participants: List[ParticipantIn]
    flight_options: List[FlightOptionIn] = []
    transport_items: List[TransportItemIn] = []
    lodging_stays: List[LodgingStayIn] = []

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v):
        """Currency must be a 3-letter code."""
        if v is None:
            return v
        v = v.strip().upper()
        if len(v) != 3:
            raise ValueError("currency must be a 3-letter code")
        return v


class TripSummaryResponse(BaseModel):
    """Schema for trip settlement summary."""
    currency: str
    cost_item_count: int  # Cost items included in the calculation
    total_paid: Decimal
    balances: List[ParticipantBalanceResponse]
    settlements: List[SettlementResponse]
    summary: str
    
    class Config:
        from_attributes = True
