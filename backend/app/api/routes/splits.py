"""
Split routes.
"""
from fastapi import APIRouter, HTTPException, status
from app.core.utils import round_to_cents
from app.schemas.split import SplitPreviewRequest, SplitPreviewResponse, SplitShare
from app.services.split_service import SplitValidationError, split_shares, validate_split

router = APIRouter(prefix="/splits", tags=["splits"])


@router.post("/preview", response_model=SplitPreviewResponse)
async def preview_split(request: SplitPreviewRequest):
    """Check a split and show what each participant would owe."""
    split = request.split.to_split()
    try:
        validate_split(request.amount, split, request.trip_participant_ids)
    except SplitValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    
    shares = [
        SplitShare(participant_id=participant_id, amount=round_to_cents(amount))
        for participant_id, amount in split_shares(request.amount, split).items()
    ]
    return SplitPreviewResponse(
        amount=request.amount,
        split_mode=split.split_mode,
        shares=shares
    )
