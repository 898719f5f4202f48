"""
Pydantic schema for leaderboard rows.

Each row is one creator: ``_id`` holds the creator's email (the
grouping key), ``name`` the first name seen for that email and
``assignmentCount`` how many assignments they created.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LeaderboardEntry(BaseModel):
    email: Optional[str] = Field(None, alias="_id")
    name: Optional[str] = None
    assignment_count: int = Field(..., alias="assignmentCount")

    model_config = {
        "populate_by_name": True,
    }
