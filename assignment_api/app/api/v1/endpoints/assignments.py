"""
Assignment endpoints for API v1.

Browsing assignments is public.  Creating, editing and deleting them
requires a verified Firebase ID token, and only an assignment's
creator may delete it.  A single assignment is served under both
``/assignment/{id}`` and ``/assignments/{id}``; the web client uses the
singular form.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from assignment_api.app.core.errors import NotFoundError, PermissionDeniedError
from assignment_api.app.core.security import get_current_user
from assignment_api.app.schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentUpdate
from assignment_api.app.schemas.common import InsertResult, OperationResult
from assignment_api.app.services.assignment_service import AssignmentService


router = APIRouter()


@router.post(
    "/assignments",
    response_model=InsertResult,
    response_model_exclude_none=True,
    summary="Create an assignment",
)
async def create_assignment(
    data: AssignmentCreate,
    current_user: dict = Depends(get_current_user),
) -> InsertResult:
    """Create a new assignment owned by the current user."""
    try:
        return await AssignmentService.create_assignment(data, current_user)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get(
    "/assignments",
    response_model=List[AssignmentRead],
    summary="List assignments",
)
async def list_assignments(
    difficulty: Optional[str] = Query(None, description="Exact difficulty, e.g. 'easy'"),
    search: Optional[str] = Query(None, description="Case-insensitive title search"),
) -> List[AssignmentRead]:
    try:
        return await AssignmentService.list_assignments(difficulty=difficulty, search=search)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get(
    "/assignment/{assignment_id}",
    response_model=AssignmentRead,
    summary="Get a single assignment",
)
@router.get(
    "/assignments/{assignment_id}",
    response_model=AssignmentRead,
    include_in_schema=False,
)
async def get_assignment(assignment_id: str) -> AssignmentRead:
    """Retrieve a single assignment by its ID.

    Returns 404 if it does not exist and 400 if the ID is malformed.
    """
    try:
        return await AssignmentService.get_assignment(assignment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        # Stored document does not fit the read model.
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.put(
    "/assignments/{assignment_id}",
    response_model=OperationResult,
    summary="Update an assignment",
)
async def update_assignment(
    assignment_id: str,
    data: AssignmentUpdate,
    current_user: dict = Depends(get_current_user),
) -> OperationResult:
    """Update the editable fields of an assignment.

    Only ``title``, ``description``, ``marks``, ``thumbnail``,
    ``difficulty`` and ``dueDate`` can change.  If the stored document
    already holds the sent values the request fails with 400.
    """
    try:
        return await AssignmentService.update_assignment(assignment_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.delete(
    "/assignments/{assignment_id}",
    response_model=OperationResult,
    response_model_exclude_none=True,
    summary="Delete an assignment",
)
async def delete_assignment(
    assignment_id: str,
    email: Optional[str] = Query(None, description="Requester email, used when the token carries none"),
    current_user: dict = Depends(get_current_user),
) -> OperationResult:
    """Delete an assignment created by the current user.

    Ownership is checked against the email in the verified token.  The
    ``email`` query parameter is only consulted for accounts whose
    token has no email claim (e.g. phone sign‑in).
    """
    requester = current_user.get("email") or email
    try:
        return await AssignmentService.delete_assignment(assignment_id, requester)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
