"""Friend DTOs for use case output and API responses."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from src.domain.entities.friend import Friend, FriendStatus


class SendFriendRequestResult(BaseModel):
    friend_request_id: str
    status: FriendStatus
    requested_at: datetime


class AcceptFriendRequestResult(BaseModel):
    friend_request_id: str
    status: FriendStatus
    accepted_at: datetime
    friend_user_id: str


class RejectFriendRequestResult(BaseModel):
    friend_request_id: str
    status: FriendStatus
    rejected_at: datetime


class RemoveFriendResult(BaseModel):
    success: bool
    removed_at: datetime


class FriendDTO(BaseModel):
    user_id: str
    name: str
    profile_image_url: Optional[str] = None
    status: FriendStatus
    request_id: str
    requested_at: datetime
    responded_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, friend: Friend) -> "FriendDTO":
        return cls(
            user_id=friend.friend_user_id.value,
            name=friend.friend_name.value,
            profile_image_url=friend.friend_image_url,
            status=friend.status,
            request_id=friend.request_id,
            requested_at=friend.requested_at,
            responded_at=friend.responded_at,
        )


class FriendListDTO(BaseModel):
    friends: list[FriendDTO]
    total: int
    limit: int
    offset: int
    has_more: bool


class FriendRequestListDTO(FriendListDTO):
    type: Literal["received", "sent"]
