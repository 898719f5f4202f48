"""
Authentication through Firebase ID tokens.

The web client signs users in with Firebase and sends the resulting ID
token as ``Authorization: Bearer <token>``.  This module initialises
the Firebase Admin SDK once per process and provides the
``get_current_user`` dependency that protected routes declare.

A request without a bearer token is rejected with 401; a token that
Firebase refuses (expired, revoked, signed for another project) is
rejected with 403.  On success the decoded claims are returned as a
plain dict, e.g. ``{"uid": ..., "email": ..., "name": ...}``.
"""

import logging
import os
from typing import Any, Dict, Optional

import firebase_admin
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from .config import settings

logger = logging.getLogger(__name__)


def init_firebase() -> firebase_admin.App:
    """Initialise the default Firebase app if it does not exist yet.

    The service account file named by ``settings.firebase_credentials``
    is preferred.  When it is missing, application default credentials
    are used, which is what hosted environments usually provide.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    if os.path.isfile(settings.firebase_credentials):
        cred = credentials.Certificate(settings.firebase_credentials)
        logger.info("Firebase initialised from %s", settings.firebase_credentials)
    else:
        cred = credentials.ApplicationDefault()
        logger.warning(
            "Service account file %s not found; using application default credentials",
            settings.firebase_credentials,
        )
    return firebase_admin.initialize_app(cred, options or None)


def verify_token(token: str) -> Dict[str, Any]:
    """Verify a Firebase ID token and return its decoded claims.

    Raises ``ValueError`` or a ``FirebaseError`` subclass when the token
    is malformed, expired, revoked or not issued for this project.
    """
    return auth.verify_id_token(token)


security = HTTPBearer(auto_error=False)


def get_current_user(bearer: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    ``HTTPBearer`` returns ``None`` both when the header is absent and
    when it does not use the Bearer scheme; either way the request is
    unauthenticated.
    """
    if bearer is None or not bearer.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verify_token(bearer.credentials)
    except (ValueError, FirebaseError) as e:
        logger.info("Rejected ID token: %s", e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
