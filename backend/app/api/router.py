"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import balances, settlements, splits, trips

api_router = APIRouter()

# Include all route modules
api_router.include_router(balances.router)
api_router.include_router(settlements.router)
api_router.include_router(trips.router)
api_router.include_router(splits.router)
