"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so local development only needs
that file; variables already present in the environment win.
Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote_plus

from dotenv import load_dotenv

load_dotenv()


def _build_mongo_uri() -> str:
    """Return the MongoDB connection string.

    ``MONGO_URI`` is used verbatim when set.  Otherwise an Atlas style
    ``mongodb+srv`` URI is assembled from ``MONGO_USER``, ``MONGO_PASS``,
    ``MONGO_HOST`` and ``MONGO_DB``; the credentials are percent-escaped
    so passwords containing ``@`` or ``:`` survive.  Without a user and
    host the API falls back to a local server.
    """
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri
    user = os.getenv("MONGO_USER")
    host = os.getenv("MONGO_HOST")
    if user and host:
        password = os.getenv("MONGO_PASS", "")
        database = os.getenv("MONGO_DB", "assignments")
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/{database}"
            "?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Assignment API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Prefix for every route.  Empty by default because the web client
    # calls ``/assignments``, ``/reviews`` etc. at the server root.
    api_prefix: str = os.getenv("API_PREFIX", "")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    mongo_uri: str = field(default_factory=_build_mongo_uri)
    mongo_db: str = os.getenv("MONGO_DB", "assignments")
    # Milliseconds the driver waits for a reachable server before failing
    # a call.  Keeps requests from hanging when the cluster is down.
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # Path to the Firebase service account JSON used to verify ID tokens.
    # When the file does not exist, application default credentials are
    # used together with ``firebase_project_id``.
    firebase_credentials: str = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
    firebase_project_id: str = os.getenv("FIREBASE_PROJECT_ID", "")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
