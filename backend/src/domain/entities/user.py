"""
User Entity - A registered member as seen by the friends and DM features.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.domain.value_objects.user_email import UserEmail
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName


@dataclass(frozen=True)
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    name: UserName
    # Optional fields (with defaults) - must come last
    email: Optional[UserEmail] = None
    profile_image_url: Optional[str] = None
    accepts_friend_requests: bool = True
    friend_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
