"""
Balance calculation routes.
"""
from fastapi import APIRouter
from typing import List
from app.schemas.settlement import BalanceRequest, ParticipantBalanceResponse
from app.services.settlement_service import calculate_balances

router = APIRouter(prefix="/balances", tags=["balances"])


@router.post("", response_model=List[ParticipantBalanceResponse])
async def get_balances(request: BalanceRequest):
    """Calculate each participant's paid, owed and net balance."""
    participants = [p.to_participant() for p in request.participants]
    cost_items = [item.to_cost_item(item.kind) for item in request.cost_items]
    return calculate_balances(cost_items, participants)
