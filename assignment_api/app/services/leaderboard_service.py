"""
Service layer for the leaderboard.

The leaderboard ranks creators by how many assignments they have
published.  It is computed on demand with a single aggregation over
the ``assignments`` collection; nothing is cached or stored.
"""

from typing import Any, Dict, List

from fastapi.concurrency import run_in_threadpool

from ..core.db import ASSIGNMENTS, get_collection
from ..schemas.leaderboard import LeaderboardEntry

PAGE_SIZE = 10


class LeaderboardService:
    """Service computing creator rankings."""

    @classmethod
    def pipeline(cls, page: int, page_size: int = PAGE_SIZE) -> List[Dict[str, Any]]:
        """Build the aggregation pipeline for one leaderboard page.

        Assignments are grouped by ``creator.email``.  The creator name
        is the first one encountered for that email, so a creator who
        renamed themselves may show either name.
        """
        skip = (page - 1) * page_size
        return [
            {
                "$group": {
                    "_id": "$creator.email",
                    "name": {"$first": "$creator.name"},
                    "assignmentCount": {"$sum": 1},
                }
            },
            {"$sort": {"assignmentCount": -1, "_id": 1}},
            {"$skip": skip},
            {"$limit": page_size},
        ]

    @classmethod
    async def leaderboard(cls, page: int = 1) -> List[LeaderboardEntry]:
        """Return one page of the leaderboard, highest count first."""
        pipeline = cls.pipeline(page)
        rows = await run_in_threadpool(
            lambda: list(get_collection(ASSIGNMENTS).aggregate(pipeline))
        )
        return [LeaderboardEntry(**row) for row in rows]
