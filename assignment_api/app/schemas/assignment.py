"""
Pydantic schemas for assignments.

An assignment is created by a signed‑in user and carries its creator's
name and email, which the leaderboard groups on and which guards
deletion.  Only the fields listed in ``AssignmentUpdate`` can be
edited after creation.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .common import DocumentRead


class Creator(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None

    model_config = {
        "extra": "allow",
    }


class AssignmentCreate(BaseModel):
    """Schema for creating an assignment.

    Unknown keys are stored as sent so the client can grow its form
    without a server release.
    """

    title: str = Field(..., examples=["Linked list reversal"])
    description: Optional[str] = Field(None, examples=["Reverse a singly linked list in place"])
    marks: Optional[int] = Field(None, ge=0, examples=[50])
    thumbnail: Optional[str] = Field(None, examples=["https://i.ibb.co/abc/list.png"])
    difficulty: Optional[str] = Field(None, examples=["medium"])
    due_date: Optional[str] = Field(None, alias="dueDate", examples=["2025-09-30"])
    creator: Optional[Creator] = None

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


class AssignmentUpdate(BaseModel):
    """Schema for updating an assignment.

    All fields are optional; only provided fields are written.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    marks: Optional[int] = Field(None, ge=0)
    thumbnail: Optional[str] = None
    difficulty: Optional[str] = None
    due_date: Optional[str] = Field(None, alias="dueDate")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: Optional[str]) -> str:
        # Runs only for a title the client sent; null is never a valid title.
        if v is None:
            raise ValueError("title cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v


class AssignmentRead(DocumentRead):
    """Schema for reading an assignment from the API."""

    title: Optional[str] = None
    description: Optional[str] = None
    marks: Optional[Union[int, float]] = None
    thumbnail: Optional[str] = None
    difficulty: Optional[str] = None
    due_date: Optional[str] = Field(None, alias="dueDate")
    creator: Optional[Dict[str, Any]] = None
