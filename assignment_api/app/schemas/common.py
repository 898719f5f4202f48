"""
Shared response shapes.

Write endpoints answer with a small status object rather than the
stored document, e.g. ``{"success": true, "insertedId": "..."}``.
``DocumentRead`` is the base for every model built from a MongoDB
document: it renders ``_id`` as a string and keeps fields the schema
does not declare, since clients may store extra keys.
"""

from typing import Optional

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator


class DocumentRead(BaseModel):
    """Base schema for documents read from a collection."""

    id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
        "extra": "allow",
    }

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v


class OperationResult(BaseModel):
    success: bool = True
    message: Optional[str] = None


class InsertResult(OperationResult):
    """Result of an insert; ``insertedId`` is the new document's id."""

    inserted_id: str = Field(..., alias="insertedId")

    model_config = {
        "populate_by_name": True,
    }


class ModifiedResult(OperationResult):
    """Result of an update reporting how many documents changed."""

    modified_count: int = Field(..., alias="modifiedCount")

    model_config = {
        "populate_by_name": True,
    }
