"""
Review endpoints for API v1.

Reviews are public testimonials: anyone can post one and the home page
lists the most recent ones.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from assignment_api.app.schemas.common import InsertResult
from assignment_api.app.schemas.review import ReviewCreate, ReviewRead
from assignment_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post(
    "/reviews",
    response_model=InsertResult,
    status_code=status.HTTP_201_CREATED,
    summary="Add a review",
)
async def create_review(data: ReviewCreate) -> InsertResult:
    try:
        return await ReviewService.create_review(data)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get(
    "/reviews",
    response_model=List[ReviewRead],
    summary="List recent reviews",
)
async def list_reviews(
    limit: int = Query(12, ge=1, le=100),
    page: int = Query(1, ge=1),
) -> List[ReviewRead]:
    """Return reviews newest first, ``limit`` per page."""
    try:
        return await ReviewService.list_reviews(limit=limit, page=page)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
