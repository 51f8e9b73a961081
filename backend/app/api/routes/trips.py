"""
Trip settlement routes.
"""
from fastapi import APIRouter
from app.schemas.trip import TripSnapshot, TripSummaryResponse
from app.services.trip_service import settle_trip

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("/summary", response_model=TripSummaryResponse)
async def get_trip_summary(snapshot: TripSnapshot):
    """
    Settle a trip snapshot.

    Only selected flight options and transport items are counted, together
    with every lodging stay that has a split.
    """
    return settle_trip(snapshot)
