"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Changes state by returning a new instance (frozen dataclasses)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from src.domain.entities.user import User
from src.domain.entities.dm_channel import DMChannel, DMChannelStatus
from src.domain.entities.dm_wrapper import DMWrapper
from src.domain.entities.friend import Friend, FriendStatus

__all__ = [
    "User",
    "DMChannel",
    "DMChannelStatus",
    "DMWrapper",
    "Friend",
    "FriendStatus",
]
