"""
Firestore DMWrapper Repository Implementation.

Wrappers live at users/{ownerId}/dm_wrapper/{channelId}.
"""

from google.cloud.firestore import AsyncClient

from src.domain.entities.dm_wrapper import DMWrapper
from src.domain.ports.repositories import DMWrapperRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.firestore_paths import FirestorePaths
from src.infrastructure.persistence.firestore_support import (
    firestore_guard,
    optional_str,
    read_user_name,
)


class FirestoreDMWrapperRepository(DMWrapperRepository):
    _db: AsyncClient

    def __init__(self, db: AsyncClient):
        self._db = db

    def _collection(self, owner_id: UserId):
        return (
            self._db.collection(FirestorePaths.USERS)
            .document(owner_id.value)
            .collection(FirestorePaths.DM_WRAPPER)
        )

    def _to_entity(self, owner_id: UserId, doc_id: str, data: dict) -> DMWrapper:
        path = f"{FirestorePaths.USERS}/{owner_id.value}/{FirestorePaths.DM_WRAPPER}/{doc_id}"
        kwargs = {}
        if data.get("createdAt"):
            kwargs["created_at"] = data["createdAt"]
        if data.get("updatedAt"):
            kwargs["updated_at"] = data["updatedAt"]
        return DMWrapper(
            channel_id=data.get("channelId") or doc_id,
            other_user_id=UserId(data["otherUserId"]),
            other_user_name=read_user_name(data.get("otherUserName"), path),
            other_user_image_url=optional_str(data.get("otherUserImageUrl")),
            last_message_preview=data.get("lastMessagePreview"),
            **kwargs,
        )

    def _to_document(self, wrapper: DMWrapper) -> dict:
        return {
            "channelId": wrapper.channel_id,
            "otherUserId": wrapper.other_user_id.value,
            "otherUserName": wrapper.other_user_name.value,
            "otherUserImageUrl": wrapper.other_user_image_url,
            "lastMessagePreview": wrapper.last_message_preview,
            "createdAt": wrapper.created_at,
            "updatedAt": wrapper.updated_at,
        }

    @firestore_guard("save DM wrapper")
    async def save(self, owner_id: UserId, wrapper: DMWrapper) -> Result[DMWrapper]:
        await (
            self._collection(owner_id)
            .document(wrapper.channel_id)
            .set(self._to_document(wrapper))
        )
        return Success(wrapper)

    @firestore_guard("delete DM wrapper")
    async def delete(self, owner_id: UserId, channel_id: str) -> Result[None]:
        await self._collection(owner_id).document(channel_id).delete()
        return Success(None)

    @firestore_guard("list DM wrappers")
    async def find_by_owner(self, owner_id: UserId) -> Result[list[DMWrapper]]:
        snapshots = await self._collection(owner_id).get()
        return Success(
            [self._to_entity(owner_id, s.id, s.to_dict() or {}) for s in snapshots]
        )
