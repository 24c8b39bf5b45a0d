"""
Firestore DMChannel Repository Implementation.

Channels live at dm_channels/{channelId}; the id is derived from the sorted
participant pair, so lookup by participants is a direct document read.
"""

from typing import Optional

from google.cloud.firestore import AsyncClient

from src.domain.entities.dm_channel import DMChannel
from src.domain.ports.repositories import DMChannelRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.firestore_paths import FirestorePaths
from src.infrastructure.persistence.firestore_support import firestore_guard


class FirestoreDMChannelRepository(DMChannelRepository):
    _db: AsyncClient

    def __init__(self, db: AsyncClient):
        self._db = db

    def _collection(self):
        return self._db.collection(FirestorePaths.DM_CHANNELS)

    def _to_entity(self, doc_id: str, data: dict) -> DMChannel:
        participants = [UserId(p) for p in data.get("participants", [])]
        kwargs = {}
        if data.get("createdAt"):
            kwargs["created_at"] = data["createdAt"]
        if data.get("updatedAt"):
            kwargs["updated_at"] = data["updatedAt"]
        return DMChannel(
            id=doc_id,
            participants=tuple(participants),
            blocked_by=frozenset(UserId(u) for u in data.get("blockedBy", [])),
            last_message_preview=data.get("lastMessagePreview"),
            **kwargs,
        )

    def _to_document(self, channel: DMChannel) -> dict:
        return {
            "participants": [p.value for p in channel.participants],
            "blockedBy": sorted(u.value for u in channel.blocked_by),
            "status": channel.status.value,
            "lastMessagePreview": channel.last_message_preview,
            "createdAt": channel.created_at,
            "updatedAt": channel.updated_at,
        }

    @firestore_guard("find DM channel")
    async def find_by_id(self, channel_id: str) -> Result[Optional[DMChannel]]:
        snapshot = await self._collection().document(channel_id).get()
        if not snapshot.exists:
            return Success(None)
        return Success(self._to_entity(snapshot.id, snapshot.to_dict() or {}))

    async def find_by_participants(
        self, user_a: UserId, user_b: UserId
    ) -> Result[Optional[DMChannel]]:
        return await self.find_by_id(DMChannel.channel_id_for(user_a, user_b))

    @firestore_guard("save DM channel")
    async def save(self, channel: DMChannel) -> Result[DMChannel]:
        await self._collection().document(channel.id).set(self._to_document(channel))
        return Success(channel)
