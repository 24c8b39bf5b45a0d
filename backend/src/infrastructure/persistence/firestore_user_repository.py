"""
Firestore User Repository Implementation.

Reads users/{userId}. Profiles are written by the client app; this side
looks them up and maintains the denormalised friendCount.

Mapping (document field -> entity):
- name                  -> UserName (UNKNOWN_USER if invalid)
- email                 -> UserEmail or None
- profileImageUrl       -> profile_image_url
- acceptsFriendRequests -> accepts_friend_requests (default True)
- friendCount           -> friend_count (default 0), written after accept/remove
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from src.domain.entities.user import User
from src.domain.exceptions import ValidationError
from src.domain.ports.repositories import UserRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_email import UserEmail
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName
from src.infrastructure.persistence.firestore_paths import FirestorePaths
from src.infrastructure.persistence.firestore_support import (
    firestore_guard,
    optional_str,
    read_user_name,
)

logger = logging.getLogger(__name__)


class FirestoreUserRepository(UserRepository):
    _db: AsyncClient

    def __init__(self, db: AsyncClient):
        self._db = db

    def _to_entity(self, doc_id: str, data: dict) -> User:
        """Map Firestore document to domain entity."""
        path = f"{FirestorePaths.USERS}/{doc_id}"
        email = None
        if data.get("email"):
            try:
                email = UserEmail(data["email"])
            except ValidationError:
                logger.warning("Invalid email stored at %s", path)
        return User(
            id=UserId(doc_id),
            name=read_user_name(data.get("name"), path),
            email=email,
            profile_image_url=optional_str(data.get("profileImageUrl")),
            accepts_friend_requests=data.get("acceptsFriendRequests", True),
            friend_count=int(data.get("friendCount") or 0),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    @firestore_guard("find user by id")
    async def find_by_user_id(self, user_id: UserId) -> Result[Optional[User]]:
        snapshot = (
            await self._db.collection(FirestorePaths.USERS).document(user_id.value).get()
        )
        if not snapshot.exists:
            return Success(None)
        return Success(self._to_entity(snapshot.id, snapshot.to_dict() or {}))

    @firestore_guard("find user by name")
    async def find_by_name(self, name: UserName) -> Result[Optional[User]]:
        query = (
            self._db.collection(FirestorePaths.USERS)
            .where(filter=FieldFilter("name", "==", name.value))
            .limit(1)
        )
        snapshots = await query.get()
        if not snapshots:
            return Success(None)
        snapshot = snapshots[0]
        return Success(self._to_entity(snapshot.id, snapshot.to_dict() or {}))

    @firestore_guard("update friend count")
    async def update_friend_count(self, user_id: UserId, count: int) -> Result[None]:
        await (
            self._db.collection(FirestorePaths.USERS)
            .document(user_id.value)
            .set(
                {"friendCount": count, "updatedAt": datetime.now(timezone.utc)},
                merge=True,
            )
        )
        return Success(None)
