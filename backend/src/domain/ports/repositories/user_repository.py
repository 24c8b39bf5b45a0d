"""
User Repository Port - Interface for user lookups.
Implementation: src/infrastructure/persistence/firestore_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import User
from src.domain.result import Result
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName


class UserRepository(ABC):
    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Result[Optional[User]]: ...

    @abstractmethod
    async def find_by_name(self, name: UserName) -> Result[Optional[User]]:
        """Exact match on the stored display name."""
        ...

    @abstractmethod
    async def update_friend_count(self, user_id: UserId, count: int) -> Result[None]: ...
