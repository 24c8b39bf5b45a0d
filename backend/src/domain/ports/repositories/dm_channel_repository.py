"""
DMChannel Repository Port - Interface for DM channel persistence.
Implementation: src/infrastructure/persistence/firestore_dm_channel_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.dm_channel import DMChannel
from src.domain.result import Result
from src.domain.value_objects.user_id import UserId


class DMChannelRepository(ABC):
    @abstractmethod
    async def find_by_id(self, channel_id: str) -> Result[Optional[DMChannel]]: ...

    @abstractmethod
    async def find_by_participants(
        self, user_a: UserId, user_b: UserId
    ) -> Result[Optional[DMChannel]]: ...

    @abstractmethod
    async def save(self, channel: DMChannel) -> Result[DMChannel]: ...
