"""
Friend Repository Port - Interface for friend relationship persistence.
Implementation: src/infrastructure/persistence/firestore_friend_repository.py

Pair writes (save_pair, delete_pair) are all-or-nothing.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from src.domain.entities.friend import Friend, FriendStatus
from src.domain.result import Result
from src.domain.value_objects.user_id import UserId


class FriendRepository(ABC):
    @abstractmethod
    async def find_by_users(
        self, owner_id: UserId, other_user_id: UserId
    ) -> Result[Optional[Friend]]: ...

    @abstractmethod
    async def find_by_request_id(
        self, owner_id: UserId, request_id: str
    ) -> Result[Optional[Friend]]: ...

    @abstractmethod
    async def request_exists(self, request_id: str) -> Result[bool]:
        """Whether any user holds a side with this request id."""
        ...

    @abstractmethod
    async def find_by_owner(
        self,
        owner_id: UserId,
        statuses: Sequence[FriendStatus],
        limit: int,
        offset: int = 0,
    ) -> Result[list[Friend]]: ...

    @abstractmethod
    async def count_by_owner(
        self, owner_id: UserId, statuses: Sequence[FriendStatus]
    ) -> Result[int]: ...

    @abstractmethod
    async def save_pair(self, side_a: Friend, side_b: Friend) -> Result[None]: ...

    @abstractmethod
    async def delete_pair(self, user_a: UserId, user_b: UserId) -> Result[None]: ...
