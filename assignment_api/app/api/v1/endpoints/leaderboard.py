"""
Leaderboard endpoint for API v1.

Ranks creators by the number of assignments they have created, ten
per page.  Publicly accessible.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from assignment_api.app.schemas.leaderboard import LeaderboardEntry
from assignment_api.app.services.leaderboard_service import LeaderboardService


router = APIRouter()


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def get_leaderboard(page: int = Query(1, ge=1)) -> List[LeaderboardEntry]:
    try:
        return await LeaderboardService.leaderboard(page=page)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
