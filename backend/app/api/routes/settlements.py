"""
Settlement routes.
"""
from fastapi import APIRouter
from typing import List
from app.schemas.settlement import ParticipantBalanceIn, SettlementResponse
from app.services.settlement_service import calculate_settlements

router = APIRouter(prefix="/settlements", tags=["settlement"])


@router.post("", response_model=List[SettlementResponse])
async def get_settlements(balances: List[ParticipantBalanceIn]):
    """Suggest transfers that settle the given balances."""
    return calculate_settlements([b.to_balance() for b in balances])
