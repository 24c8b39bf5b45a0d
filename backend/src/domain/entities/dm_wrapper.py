"""
DMWrapper Entity - One user's inbox entry for a DM channel.

Each participant owns a wrapper describing the *other* participant, so the
inbox can render without loading user profiles.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DMWrapper:
    channel_id: str
    other_user_id: UserId
    other_user_name: UserName
    other_user_image_url: Optional[str] = None
    last_message_preview: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create_for_users(
        cls,
        channel_id: str,
        other_user_id: UserId,
        other_user_name: UserName,
        other_user_image_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "DMWrapper":
        now = now or _utcnow()
        return cls(
            channel_id=channel_id,
            other_user_id=other_user_id,
            other_user_name=other_user_name,
            other_user_image_url=other_user_image_url,
            created_at=now,
            updated_at=now,
        )
