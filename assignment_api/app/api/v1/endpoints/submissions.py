"""
Submission endpoints for API v1.

All routes require a verified Firebase ID token.  Users list their own
submissions, submit new work, browse other users' pending submissions
and mark them.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from assignment_api.app.core.security import get_current_user
from assignment_api.app.schemas.common import InsertResult, ModifiedResult
from assignment_api.app.schemas.submission import SubmissionCreate, SubmissionMark, SubmissionRead
from assignment_api.app.services.submission_service import SubmissionService


router = APIRouter()


def _require_email(email: Optional[str]) -> str:
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")
    return email


@router.get(
    "/submitted-assignments",
    response_model=List[SubmissionRead],
    summary="List a user's submissions",
)
async def list_submissions(
    email: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
) -> List[SubmissionRead]:
    email = _require_email(email)
    try:
        return await SubmissionService.list_submissions(email)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post(
    "/submitted-assignments",
    response_model=InsertResult,
    response_model_exclude_none=True,
    summary="Submit an assignment",
)
async def create_submission(
    data: SubmissionCreate,
    current_user: dict = Depends(get_current_user),
) -> InsertResult:
    """Submit work for an assignment; it starts out ``pending``."""
    try:
        return await SubmissionService.create_submission(data, current_user)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.patch(
    "/submitted-assignments/{submission_id}",
    response_model=ModifiedResult,
    response_model_exclude_none=True,
    summary="Mark a submission",
)
async def mark_submission(
    submission_id: str,
    data: SubmissionMark,
    current_user: dict = Depends(get_current_user),
) -> ModifiedResult:
    """Record marks and feedback and set the status to ``completed``."""
    try:
        return await SubmissionService.mark_submission(submission_id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get(
    "/pending-submitted-assignments",
    response_model=List[SubmissionRead],
    summary="List pending submissions to mark",
)
async def list_pending_submissions(
    email: Optional[str] = Query(None, description="Caller's email; their own submissions are excluded"),
    current_user: dict = Depends(get_current_user),
) -> List[SubmissionRead]:
    email = _require_email(email)
    try:
        return await SubmissionService.list_pending(exclude_email=email)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
