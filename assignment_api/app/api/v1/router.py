"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  Each endpoint module
declares its full paths itself (``/assignments``, ``/assignment/{id}``,
``/submitted-assignments`` ...) because the web client's URLs do not
share a common prefix per domain, so no prefix is given here.
"""

from fastapi import APIRouter

from .endpoints import (
    health,
    assignments,
    submissions,
    reviews,
    leaderboard,
)

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(assignments.router, tags=["assignments"])
router.include_router(submissions.router, tags=["submissions"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(leaderboard.router, tags=["leaderboard"])
