"""
Business logic for assignment submissions.

Submissions are stored in the ``submittedAssignments`` collection.  A
user submits work for an assignment, which is recorded as
``pending``.  Other users see pending submissions (never their own)
and mark them, which records the obtained marks and feedback and
flips the status to ``completed``.
"""

import logging
from typing import Any, Dict, List

from fastapi.concurrency import run_in_threadpool

from ..core.db import SUBMISSIONS, get_collection, parse_object_id, utcnow
from ..schemas.common import InsertResult, ModifiedResult
from ..schemas.submission import SubmissionCreate, SubmissionMark, SubmissionRead

logger = logging.getLogger(__name__)

PENDING = "pending"
COMPLETED = "completed"


class SubmissionService:
    """Service for submitting and marking assignments."""

    @classmethod
    async def list_submissions(cls, email: str) -> List[SubmissionRead]:
        """Return every submission made by ``email``."""
        docs = await run_in_threadpool(
            lambda: list(get_collection(SUBMISSIONS).find({"userEmail": email}))
        )
        return [SubmissionRead(**doc) for doc in docs]

    @classmethod
    async def create_submission(
        cls,
        data: SubmissionCreate,
        current_user: Dict[str, Any],
    ) -> InsertResult:
        """Record a new pending submission.

        ``status`` and ``submittedAt`` are always set here, overriding
        anything the client sent.  ``userEmail`` and ``userName`` fall
        back to the token claims.
        """
        document = data.model_dump(by_alias=True, exclude_none=True)
        document.setdefault("userEmail", current_user.get("email"))
        document.setdefault("userName", current_user.get("name"))
        document["status"] = PENDING
        document["submittedAt"] = utcnow()
        result = await run_in_threadpool(get_collection(SUBMISSIONS).insert_one, document)
        logger.info(
            "%s submitted assignment %s as %s",
            document["userEmail"], data.assignment_id, result.inserted_id,
        )
        return InsertResult(inserted_id=str(result.inserted_id))

    @classmethod
    async def mark_submission(cls, submission_id: str, data: SubmissionMark) -> ModifiedResult:
        """Store marks and feedback and complete the submission.

        The update is reported through ``modifiedCount``; an unknown ID
        yields ``0`` rather than an error.
        """
        oid = parse_object_id(submission_id)
        result = await run_in_threadpool(
            get_collection(SUBMISSIONS).update_one,
            {"_id": oid},
            {
                "$set": {
                    "obtainedMarks": data.obtained_marks,
                    "feedback": data.feedback,
                    "status": COMPLETED,
                    "markedAt": utcnow(),
                }
            },
        )
        logger.info("Marked submission %s (modified=%s)", submission_id, result.modified_count)
        return ModifiedResult(modified_count=result.modified_count)

    @classmethod
    async def list_pending(cls, exclude_email: str) -> List[SubmissionRead]:
        """Return pending submissions made by anyone except ``exclude_email``."""
        query = {"status": PENDING, "userEmail": {"$ne": exclude_email}}
        docs = await run_in_threadpool(lambda: list(get_collection(SUBMISSIONS).find(query)))
        return [SubmissionRead(**doc) for doc in docs]
