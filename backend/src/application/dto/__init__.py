"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- dm.py     → DM channel results, DMWrapperDTO
- friend.py → friend request results, FriendDTO, list envelopes

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from src.application.dto.dm import (
    BlockDMChannelResult,
    CreateDMChannelResult,
    DMWrapperDTO,
    DMWrapperListDTO,
    UnblockDMChannelResult,
)
from src.application.dto.friend import (
    AcceptFriendRequestResult,
    FriendDTO,
    FriendListDTO,
    FriendRequestListDTO,
    RejectFriendRequestResult,
    RemoveFriendResult,
    SendFriendRequestResult,
)

__all__ = [
    "CreateDMChannelResult",
    "BlockDMChannelResult",
    "UnblockDMChannelResult",
    "DMWrapperDTO",
    "DMWrapperListDTO",
    "SendFriendRequestResult",
    "AcceptFriendRequestResult",
    "RejectFriendRequestResult",
    "RemoveFriendResult",
    "FriendDTO",
    "FriendListDTO",
    "FriendRequestListDTO",
]
