"""
Pydantic schemas for assignment submissions.

A submission starts out ``pending`` and becomes ``completed`` once
another user marks it with ``obtainedMarks`` and optional feedback.
``status``, ``submittedAt`` and ``markedAt`` are always set by the
server.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from .common import DocumentRead


class SubmissionCreate(BaseModel):
    """Schema for submitting an assignment."""

    assignment_id: str = Field(..., alias="assignmentId")
    assignment_title: Optional[str] = Field(None, alias="assignmentTitle")
    marks: Optional[Union[int, float]] = None
    user_email: Optional[str] = Field(None, alias="userEmail")
    user_name: Optional[str] = Field(None, alias="userName")
    google_doc_link: Optional[str] = Field(None, alias="googleDocLink")
    notes: Optional[str] = None

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }


class SubmissionMark(BaseModel):
    """Schema for marking a submission."""

    obtained_marks: Union[int, float] = Field(..., alias="obtainedMarks")
    feedback: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("obtained_marks")
    @classmethod
    def marks_not_negative(cls, v: Union[int, float]) -> Union[int, float]:
        if v < 0:
            raise ValueError("obtainedMarks cannot be negative")
        return v


class SubmissionRead(DocumentRead):
    assignment_id: Optional[str] = Field(None, alias="assignmentId")
    assignment_title: Optional[str] = Field(None, alias="assignmentTitle")
    user_email: Optional[str] = Field(None, alias="userEmail")
    user_name: Optional[str] = Field(None, alias="userName")
    status: Optional[str] = None
    submitted_at: Optional[datetime] = Field(None, alias="submittedAt")
    obtained_marks: Optional[Union[int, float]] = Field(None, alias="obtainedMarks")
    feedback: Optional[str] = None
    marked_at: Optional[datetime] = Field(None, alias="markedAt")
