"""
Friend Entity - One directed side of a friend relationship.

A relationship between A and B is stored twice: once under A (describing B)
and once under B (describing A). Both sides share the same request_id and
are always written together.

Status per side:
    PENDING_SENT      owner sent the request
    PENDING_RECEIVED  owner received the request
    ACCEPTED          both sides are friends
    REJECTED          receiver declined; the requester may ask again
    BLOCKED           no further requests allowed
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from src.domain.exceptions import ConflictError, ValidationError
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName

if TYPE_CHECKING:
    from src.domain.entities.user import User


class FriendStatus(str, Enum):
    PENDING_SENT = "PENDING_SENT"
    PENDING_RECEIVED = "PENDING_RECEIVED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    BLOCKED = "BLOCKED"

    @property
    def is_pending(self) -> bool:
        return self in (FriendStatus.PENDING_SENT, FriendStatus.PENDING_RECEIVED)


_MIRRORED_STATUS = {
    FriendStatus.PENDING_SENT: FriendStatus.PENDING_RECEIVED,
    FriendStatus.PENDING_RECEIVED: FriendStatus.PENDING_SENT,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Friend:
    owner_id: UserId
    friend_user_id: UserId
    request_id: str
    requester_id: UserId
    status: FriendStatus
    friend_name: UserName
    friend_image_url: Optional[str] = None
    requested_at: datetime = field(default_factory=_utcnow)
    responded_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if self.owner_id == self.friend_user_id:
            raise ValidationError("friendUserId", "Cannot be friends with yourself")

    @classmethod
    def new_request_pair(
        cls, requester: "User", receiver: "User", now: Optional[datetime] = None
    ) -> tuple["Friend", "Friend"]:
        """Build the (sent, received) sides of a fresh request."""
        now = now or _utcnow()
        request_id = uuid4().hex
        sent = cls(
            owner_id=requester.id,
            friend_user_id=receiver.id,
            request_id=request_id,
            requester_id=requester.id,
            status=FriendStatus.PENDING_SENT,
            friend_name=receiver.name,
            friend_image_url=receiver.profile_image_url,
            requested_at=now,
            created_at=now,
            updated_at=now,
        )
        received = sent.mirror(requester)
        return sent, received

    def mirror(self, owner: "User") -> "Friend":
        """Rebuild the counterpart side; `owner` is the owner of this side."""
        if owner.id != self.owner_id:
            raise ValidationError("ownerId", "Mirror owner does not match this side")
        return replace(
            self,
            owner_id=self.friend_user_id,
            friend_user_id=self.owner_id,
            status=_MIRRORED_STATUS.get(self.status, self.status),
            friend_name=owner.name,
            friend_image_url=owner.profile_image_url,
        )

    def accept(self, now: Optional[datetime] = None) -> "Friend":
        return self._respond(FriendStatus.ACCEPTED, now)

    def reject(self, now: Optional[datetime] = None) -> "Friend":
        return self._respond(FriendStatus.REJECTED, now)

    def _respond(self, status: FriendStatus, now: Optional[datetime]) -> "Friend":
        if not self.is_pending():
            raise ConflictError(
                "FriendRequest",
                self.status.value,
                f"Friend request cannot be processed. Current status: {self.status.value}",
            )
        now = now or _utcnow()
        return replace(self, status=status, responded_at=now, updated_at=now)

    def is_requester(self, user_id: UserId) -> bool:
        return self.requester_id == user_id

    def is_receiver(self, user_id: UserId) -> bool:
        participants = (self.owner_id, self.friend_user_id)
        return user_id in participants and user_id != self.requester_id

    def is_pending(self) -> bool:
        return self.status.is_pending

    def is_active(self) -> bool:
        return self.status is FriendStatus.ACCEPTED
