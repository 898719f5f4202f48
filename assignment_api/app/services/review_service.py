"""
Business logic for reviews.

Reviews are stored in the ``reviews`` collection and shown newest
first.  Posting a review does not require an account.
"""

import logging
from typing import List

from fastapi.concurrency import run_in_threadpool

from ..core.db import REVIEWS, get_collection, utcnow
from ..schemas.common import InsertResult
from ..schemas.review import ReviewCreate, ReviewRead

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for posting and listing reviews."""

    @classmethod
    async def create_review(cls, data: ReviewCreate) -> InsertResult:
        document = {
            "name": data.name,
            "image": data.image,
            "email": data.email,
            "text": data.text,
            "createdAt": utcnow(),
        }
        result = await run_in_threadpool(get_collection(REVIEWS).insert_one, document)
        logger.info("Review %s added by %s", result.inserted_id, data.email)
        return InsertResult(
            message="Review added successfully",
            inserted_id=str(result.inserted_id),
        )

    @classmethod
    async def list_reviews(cls, limit: int = 12, page: int = 1) -> List[ReviewRead]:
        """Return one page of reviews ordered by ``createdAt`` descending.

        Pages are 1‑based; page ``n`` skips the first ``(n - 1) * limit``
        reviews.
        """
        skip = (page - 1) * limit
        docs = await run_in_threadpool(
            lambda: list(
                get_collection(REVIEWS)
                .find({})
                .sort("createdAt", -1)
                .skip(skip)
                .limit(limit)
            )
        )
        return [ReviewRead(**doc) for doc in docs]
