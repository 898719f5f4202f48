"""
MongoDB integration.

This module owns the process‑wide ``MongoClient`` and exposes small
helpers to reach the application's collections (``get_collection``),
verify connectivity on start (``init_db``) and close the client on
shutdown (``close_db``).  The client is created lazily on first use so
importing the application never opens a network connection.

The client pins the Stable API version 1 in strict mode, so commands
outside the versioned API fail loudly instead of drifting between
server releases.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from .config import settings

logger = logging.getLogger(__name__)

ASSIGNMENTS = "assignments"
REVIEWS = "reviews"
SUBMISSIONS = "submittedAssignments"

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    """Return the shared client, creating it on first call."""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )
    return _client


def get_database() -> Database:
    return get_client()[settings.mongo_db]


def get_collection(name: str) -> Collection:
    return get_database()[name]


def ping() -> bool:
    """Return ``True`` if the server answers a ``ping`` command."""
    try:
        get_client().admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error("MongoDB ping failed: %s", e)
        return False


def init_db() -> None:
    """Check connectivity and make sure the query indexes exist.

    Index creation is idempotent, so this runs on every start.  A
    server that is unreachable at start is logged rather than raised;
    requests will report the failure until the cluster comes back.
    """
    if not ping():
        logger.warning("MongoDB is not reachable; continuing without index setup")
        return
    get_collection(REVIEWS).create_index([("createdAt", DESCENDING)])
    get_collection(ASSIGNMENTS).create_index([("creator.email", ASCENDING)])
    get_collection(SUBMISSIONS).create_index([("userEmail", ASCENDING)])
    get_collection(SUBMISSIONS).create_index([("status", ASCENDING)])
    logger.info("Connected to MongoDB database %s", settings.mongo_db)


def close_db() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def parse_object_id(value: str) -> ObjectId:
    """Convert a path parameter into an ``ObjectId``.

    Raises
    ------
    ValueError
        If ``value`` is not a 24 character hex string.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValueError(f"Invalid id: {value}")


def utcnow() -> datetime:
    """Timestamp stored on created and marked documents."""
    return datetime.now(timezone.utc)
