"""Paging helpers shared by the friend list queries."""

from typing import Sequence

from src.application.common.guards import require_range
from src.application.dto.friend import FriendDTO
from src.domain.constants import ValidationRules
from src.domain.entities.friend import FriendStatus
from src.domain.exceptions import NotFoundError
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.value_objects.user_id import UserId

DEFAULT_PAGE_LIMIT = 50


def check_page(limit: int, offset: int) -> None:
    require_range("limit", limit, 1, ValidationRules.PAGE_MAX_LIMIT)
    require_range("offset", offset, 0)


async def ensure_user_exists(user_repository: UserRepository, user_id: UserId) -> None:
    user = (await user_repository.find_by_user_id(user_id)).unwrap()
    if user is None:
        raise NotFoundError("User", user_id.value)


async def load_page(
    friend_repository: FriendRepository,
    owner_id: UserId,
    statuses: Sequence[FriendStatus],
    limit: int,
    offset: int,
) -> tuple[list[FriendDTO], int]:
    friends = (
        await friend_repository.find_by_owner(owner_id, statuses, limit, offset)
    ).unwrap()
    total = (await friend_repository.count_by_owner(owner_id, statuses)).unwrap()
    return [FriendDTO.from_entity(f) for f in friends], total
