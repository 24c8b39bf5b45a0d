"""
Firestore client factory.

Initializes the default firebase_admin app once per process, then hands out
an async Firestore client bound to it.
"""

import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

logger = logging.getLogger(__name__)


def init_firebase_app(
    credentials_path: Optional[str] = None, project_id: Optional[str] = None
) -> firebase_admin.App:
    if firebase_admin._apps:
        return firebase_admin.get_app()

    if credentials_path:
        if not os.path.exists(credentials_path):
            raise FileNotFoundError(
                f"Firebase credentials file not found: {credentials_path}"
            )
        cred = credentials.Certificate(credentials_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {"projectId": project_id} if project_id else None
    app = firebase_admin.initialize_app(cred, options)
    logger.info("Firebase app initialized (project: %s)", project_id or "default")
    return app


def create_firestore_client(
    credentials_path: Optional[str] = None, project_id: Optional[str] = None
) -> AsyncClient:
    app = init_firebase_app(credentials_path, project_id)
    return firestore_async.client(app)
