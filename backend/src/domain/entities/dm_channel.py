"""
DMChannel Entity - A one-to-one conversation between two users.

Block state is tracked per participant, so a channel can be blocked by one
side, by the other, or by both. Only the participant who blocked can lift
their own block.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from src.domain.exceptions import ConflictError, ValidationCode, ValidationError
from src.domain.value_objects.user_id import UserId


class DMChannelStatus(str, Enum):
    ACTIVE = "ACTIVE"
    BLOCKED_BY_A = "BLOCKED_BY_A"
    BLOCKED_BY_B = "BLOCKED_BY_B"
    BLOCKED_BY_BOTH = "BLOCKED_BY_BOTH"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DMChannel:
    id: str
    participants: tuple[UserId, UserId]
    blocked_by: frozenset[UserId] = frozenset()
    last_message_preview: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if len(self.participants) != 2:
            raise ValidationError(
                "participants", "A DM channel has exactly two participants"
            )
        first, second = self.participants
        if first == second:
            raise ValidationError(
                "participants", "Cannot create a DM channel with yourself"
            )
        object.__setattr__(
            self, "participants", tuple(sorted(self.participants, key=str))
        )
        object.__setattr__(self, "blocked_by", frozenset(self.blocked_by))
        if not self.blocked_by <= set(self.participants):
            raise ValidationError(
                "blocked_by",
                "Only participants can block a channel",
                ValidationCode.NOT_PARTICIPANT,
            )

    @staticmethod
    def channel_id_for(user_a: UserId, user_b: UserId) -> str:
        first, second = sorted((user_a.value, user_b.value))
        return f"dm_{first}_{second}"

    @classmethod
    def create_for_users(
        cls, user_a: UserId, user_b: UserId, now: Optional[datetime] = None
    ) -> "DMChannel":
        now = now or _utcnow()
        return cls(
            id=cls.channel_id_for(user_a, user_b),
            participants=(user_a, user_b),
            created_at=now,
            updated_at=now,
        )

    @property
    def status(self) -> DMChannelStatus:
        user_a, user_b = self.participants
        blocked_a = user_a in self.blocked_by
        blocked_b = user_b in self.blocked_by
        if blocked_a and blocked_b:
            return DMChannelStatus.BLOCKED_BY_BOTH
        if blocked_a:
            return DMChannelStatus.BLOCKED_BY_A
        if blocked_b:
            return DMChannelStatus.BLOCKED_BY_B
        return DMChannelStatus.ACTIVE

    def has_participant(self, user_id: UserId) -> bool:
        return user_id in self.participants

    def get_other_participant(self, user_id: UserId) -> UserId:
        self._require_participant(user_id)
        user_a, user_b = self.participants
        return user_b if user_id == user_a else user_a

    def is_blocked_by_user(self, user_id: UserId) -> bool:
        return user_id in self.blocked_by

    def is_blocked(self) -> bool:
        return bool(self.blocked_by)

    def is_active(self) -> bool:
        return self.status is DMChannelStatus.ACTIVE

    def block(self, user_id: UserId, now: Optional[datetime] = None) -> "DMChannel":
        self._require_participant(user_id)
        if self.is_blocked_by_user(user_id):
            raise ConflictError(
                "DMChannel", self.status.value, "Channel is already blocked by you"
            )
        return replace(
            self,
            blocked_by=self.blocked_by | {user_id},
            updated_at=now or _utcnow(),
        )

    def unblock_by_user(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> "DMChannel":
        self._require_participant(user_id)
        if not self.is_blocked_by_user(user_id):
            raise ConflictError(
                "DMChannel", self.status.value, "Channel is not blocked by you"
            )
        return replace(
            self,
            blocked_by=self.blocked_by - {user_id},
            updated_at=now or _utcnow(),
        )

    def _require_participant(self, user_id: UserId) -> None:
        if not self.has_participant(user_id):
            raise ValidationError(
                "userId",
                "User is not a participant of this channel",
                ValidationCode.NOT_PARTICIPANT,
            )
