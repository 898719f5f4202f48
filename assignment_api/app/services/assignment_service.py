"""
Business logic for assignments.

Assignments live in the ``assignments`` collection.  Anyone may browse
them; creating, editing and deleting require a signed‑in user, and
only the creator may delete an assignment.  Each method maps onto a
single collection call, with a preliminary lookup where deletion
needs to check ownership.

pymongo is synchronous, so every collection call runs in the
threadpool; a slow cluster must not stall the event loop.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool

from ..core.db import ASSIGNMENTS, get_collection, parse_object_id
from ..core.errors import NotFoundError, PermissionDeniedError
from ..schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentUpdate
from ..schemas.common import InsertResult, OperationResult

logger = logging.getLogger(__name__)


class AssignmentService:
    """Service for creating, querying and maintaining assignments."""

    @classmethod
    async def create_assignment(
        cls,
        data: AssignmentCreate,
        current_user: Dict[str, Any],
    ) -> InsertResult:
        """Insert a new assignment.

        When the payload has no creator email, the creator is taken from
        the verified token so the assignment still shows up on the
        leaderboard and can be deleted by its author.
        """
        document = data.model_dump(by_alias=True, exclude_none=True)
        creator = document.get("creator") or {}
        if not creator.get("email"):
            creator["email"] = current_user.get("email")
            creator.setdefault("name", current_user.get("name"))
            document["creator"] = creator
        result = await run_in_threadpool(get_collection(ASSIGNMENTS).insert_one, document)
        logger.info("User %s created assignment %s", current_user.get("uid"), result.inserted_id)
        return InsertResult(
            message="Assignment created successfully",
            inserted_id=str(result.inserted_id),
        )

    @classmethod
    async def list_assignments(
        cls,
        difficulty: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[AssignmentRead]:
        """List assignments, optionally filtered.

        ``difficulty`` must match exactly; ``search`` is a case
        insensitive substring match on the title.  The search text is
        escaped, so characters such as ``+`` or ``(`` match literally.
        """
        query: Dict[str, Any] = {}
        if difficulty:
            query["difficulty"] = difficulty
        if search:
            query["title"] = {"$regex": re.escape(search), "$options": "i"}
        docs = await run_in_threadpool(lambda: list(get_collection(ASSIGNMENTS).find(query)))
        return [AssignmentRead(**doc) for doc in docs]

    @classmethod
    async def get_assignment(cls, assignment_id: str) -> AssignmentRead:
        """Retrieve a single assignment by ID.

        Raises ``NotFoundError`` if no document has this ID.
        """
        oid = parse_object_id(assignment_id)
        doc = await run_in_threadpool(get_collection(ASSIGNMENTS).find_one, {"_id": oid})
        if not doc:
            raise NotFoundError("Assignment not found")
        return AssignmentRead(**doc)

    @classmethod
    async def update_assignment(
        cls,
        assignment_id: str,
        data: AssignmentUpdate,
    ) -> OperationResult:
        """Overwrite the editable fields sent by the client.

        Fields missing from the payload keep their stored value.  A
        request that changes nothing is reported as an error, matching
        what the client expects when a form is submitted unchanged.
        """
        oid = parse_object_id(assignment_id)
        changes = data.model_dump(by_alias=True, exclude_unset=True)
        if not changes:
            raise ValueError("Nothing was updated")
        result = await run_in_threadpool(
            get_collection(ASSIGNMENTS).update_one, {"_id": oid}, {"$set": changes},
        )
        if result.matched_count == 0:
            raise NotFoundError("Assignment not found")
        if result.modified_count == 0:
            raise ValueError("Nothing was updated")
        logger.info("Updated assignment %s fields %s", assignment_id, sorted(changes))
        return OperationResult(message="Assignment updated successfully")

    @classmethod
    async def delete_assignment(
        cls,
        assignment_id: str,
        requester_email: Optional[str],
    ) -> OperationResult:
        """Delete an assignment owned by ``requester_email``.

        Raises ``NotFoundError`` when the assignment does not exist and
        ``PermissionDeniedError`` when its creator email differs from
        the requester's.
        """
        oid = parse_object_id(assignment_id)
        collection = get_collection(ASSIGNMENTS)
        doc = await run_in_threadpool(collection.find_one, {"_id": oid})
        if not doc:
            raise NotFoundError("Assignment not found")
        owner = (doc.get("creator") or {}).get("email")
        if not requester_email or owner != requester_email:
            raise PermissionDeniedError("You are not authorized to delete this assignment.")
        result = await run_in_threadpool(collection.delete_one, {"_id": oid})
        if result.deleted_count == 0:
            # Another request removed it between the lookup and the delete.
            logger.error("Delete of assignment %s matched no document", assignment_id)
            raise RuntimeError("Delete failed internally.")
        logger.info("User %s deleted assignment %s", requester_email, assignment_id)
        return OperationResult()
