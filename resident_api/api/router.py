"""
Root router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from resident_api.api.endpoints import health, residents

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(residents.router, prefix="/api/residents", tags=["residents"])
