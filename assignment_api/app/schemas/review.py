"""
Pydantic schemas for site reviews.

Reviews are short public testimonials shown on the home page.  Anyone
may post one; ``name``, ``email`` and ``text`` are required.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import DocumentRead


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    name: str = Field(..., description="Display name of the reviewer")
    email: str = Field(..., description="Reviewer email")
    text: str = Field(..., description="Review text")
    image: Optional[str] = Field(None, description="Avatar URL")

    @field_validator("name", "email", "text")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Missing fields")
        return v


class ReviewRead(DocumentRead):
    name: Optional[str] = None
    email: Optional[str] = None
    text: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
