"""
DMWrapper Repository Port - Interface for per-user DM inbox entries.
Implementation: src/infrastructure/persistence/firestore_dm_wrapper_repository.py
"""

from abc import ABC, abstractmethod

from src.domain.entities.dm_wrapper import DMWrapper
from src.domain.result import Result
from src.domain.value_objects.user_id import UserId


class DMWrapperRepository(ABC):
    @abstractmethod
    async def save(self, owner_id: UserId, wrapper: DMWrapper) -> Result[DMWrapper]: ...

    @abstractmethod
    async def delete(self, owner_id: UserId, channel_id: str) -> Result[None]: ...

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> Result[list[DMWrapper]]: ...
