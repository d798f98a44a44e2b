"""
API v1 Router - Main Entry Point
Aggregates the v1 endpoints of the complaint tracker.
"""

from fastapi import APIRouter

from hostelmate.api.v1 import auth, complaints

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"},
    }
)

router.include_router(auth.router)
router.include_router(complaints.router)

__all__ = ["router"]
