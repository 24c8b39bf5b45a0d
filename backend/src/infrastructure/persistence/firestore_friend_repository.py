"""
Firestore Friend Repository Implementation.

Each side of a relationship is users/{ownerId}/friends/{friendUserId}, so the
document id is the other user's id and a pair lookup is a direct read.
Pair writes go through a single WriteBatch.

Mapping (document field -> entity):
- userId          -> friend_user_id
- name            -> friend_name (UNKNOWN_USER if invalid)
- profileImageUrl -> friend_image_url
- requestId, requesterId, status, requestedAt, respondedAt, createdAt, updatedAt
"""

from typing import Optional, Sequence

from google.cloud import firestore
from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from src.domain.entities.friend import Friend, FriendStatus
from src.domain.ports.repositories import FriendRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.firestore_paths import FirestorePaths
from src.infrastructure.persistence.firestore_support import (
    firestore_guard,
    optional_str,
    read_user_name,
)


class FirestoreFriendRepository(FriendRepository):
    _db: AsyncClient

    def __init__(self, db: AsyncClient):
        self._db = db

    def _collection(self, owner_id: UserId):
        return (
            self._db.collection(FirestorePaths.USERS)
            .document(owner_id.value)
            .collection(FirestorePaths.FRIENDS)
        )

    def _status_query(self, owner_id: UserId, statuses: Sequence[FriendStatus]):
        values = [s.value for s in statuses]
        if len(values) == 1:
            return self._collection(owner_id).where(
                filter=FieldFilter("status", "==", values[0])
            )
        return self._collection(owner_id).where(filter=FieldFilter("status", "in", values))

    def _to_entity(self, owner_id: UserId, doc_id: str, data: dict) -> Friend:
        path = f"{FirestorePaths.USERS}/{owner_id.value}/{FirestorePaths.FRIENDS}/{doc_id}"
        friend_user_id = UserId(data.get("userId") or doc_id)
        kwargs = {
            key: data[field]
            for key, field in (
                ("requested_at", "requestedAt"),
                ("created_at", "createdAt"),
                ("updated_at", "updatedAt"),
            )
            if data.get(field)
        }
        return Friend(
            owner_id=owner_id,
            friend_user_id=friend_user_id,
            request_id=data.get("requestId") or doc_id,
            requester_id=UserId(data.get("requesterId") or owner_id.value),
            status=FriendStatus(data["status"]),
            friend_name=read_user_name(data.get("name"), path),
            friend_image_url=optional_str(data.get("profileImageUrl")),
            responded_at=data.get("respondedAt"),
            **kwargs,
        )

    def _to_document(self, friend: Friend) -> dict:
        return {
            "userId": friend.friend_user_id.value,
            "requestId": friend.request_id,
            "requesterId": friend.requester_id.value,
            "status": friend.status.value,
            "name": friend.friend_name.value,
            "profileImageUrl": friend.friend_image_url,
            "requestedAt": friend.requested_at,
            "respondedAt": friend.responded_at,
            "createdAt": friend.created_at,
            "updatedAt": friend.updated_at,
        }

    @firestore_guard("find friend relationship")
    async def find_by_users(
        self, owner_id: UserId, other_user_id: UserId
    ) -> Result[Optional[Friend]]:
        snapshot = await self._collection(owner_id).document(other_user_id.value).get()
        if not snapshot.exists:
            return Success(None)
        return Success(self._to_entity(owner_id, snapshot.id, snapshot.to_dict() or {}))

    @firestore_guard("find friend request")
    async def find_by_request_id(
        self, owner_id: UserId, request_id: str
    ) -> Result[Optional[Friend]]:
        query = (
            self._collection(owner_id)
            .where(filter=FieldFilter("requestId", "==", request_id))
            .limit(1)
        )
        snapshots = await query.get()
        if not snapshots:
            return Success(None)
        snapshot = snapshots[0]
        return Success(self._to_entity(owner_id, snapshot.id, snapshot.to_dict() or {}))

    @firestore_guard("find friend request")
    async def request_exists(self, request_id: str) -> Result[bool]:
        # Collection-group query over every users/{id}/friends subcollection
        query = (
            self._db.collection_group(FirestorePaths.FRIENDS)
            .where(filter=FieldFilter("requestId", "==", request_id))
            .limit(1)
        )
        snapshots = await query.get()
        return Success(bool(snapshots))

    @firestore_guard("list friends")
    async def find_by_owner(
        self,
        owner_id: UserId,
        statuses: Sequence[FriendStatus],
        limit: int,
        offset: int = 0,
    ) -> Result[list[Friend]]:
        query = (
            self._status_query(owner_id, statuses)
            .order_by("requestedAt", direction=firestore.Query.DESCENDING)
            .offset(offset)
            .limit(limit)
        )
        snapshots = await query.get()
        return Success(
            [self._to_entity(owner_id, s.id, s.to_dict() or {}) for s in snapshots]
        )

    @firestore_guard("count friends")
    async def count_by_owner(
        self, owner_id: UserId, statuses: Sequence[FriendStatus]
    ) -> Result[int]:
        aggregation = self._status_query(owner_id, statuses).count(alias="total")
        results = await aggregation.get()
        return Success(int(results[0][0].value) if results else 0)

    @firestore_guard("save friend relationship")
    async def save_pair(self, side_a: Friend, side_b: Friend) -> Result[None]:
        batch = self._db.batch()
        for side in (side_a, side_b):
            ref = self._collection(side.owner_id).document(side.friend_user_id.value)
            batch.set(ref, self._to_document(side))
        await batch.commit()
        return Success(None)

    @firestore_guard("delete friend relationship")
    async def delete_pair(self, user_a: UserId, user_b: UserId) -> Result[None]:
        batch = self._db.batch()
        batch.delete(self._collection(user_a).document(user_b.value))
        batch.delete(self._collection(user_b).document(user_a.value))
        await batch.commit()
        return Success(None)
