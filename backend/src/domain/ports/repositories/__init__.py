"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines async methods the use cases need
- Returns Result: I/O failures come back as Failure(InternalError), never raised

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.user_repository import UserRepository
from src.domain.ports.repositories.dm_channel_repository import DMChannelRepository
from src.domain.ports.repositories.dm_wrapper_repository import DMWrapperRepository
from src.domain.ports.repositories.friend_repository import FriendRepository

__all__ = [
    "UserRepository",
    "DMChannelRepository",
    "DMWrapperRepository",
    "FriendRepository",
]
