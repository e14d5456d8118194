"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from wellness.api.routes import checkins, insights

api_router = APIRouter()

# Include all route modules
api_router.include_router(checkins.router)
api_router.include_router(insights.router)
