"""Best-effort refresh of the denormalised friendCount on user documents."""

import logging
from typing import Iterable

from src.domain.entities.friend import FriendStatus
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.result import Failure
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


async def refresh_friend_counts(
    friend_repository: FriendRepository,
    user_repository: UserRepository,
    user_ids: Iterable[UserId],
) -> None:
    """Recount ACCEPTED friends for each user; failures are logged, not raised."""
    for user_id in user_ids:
        try:
            counted = await friend_repository.count_by_owner(
                user_id, [FriendStatus.ACCEPTED]
            )
            if isinstance(counted, Failure):
                raise counted.error
            updated = await user_repository.update_friend_count(user_id, counted.data)
            if isinstance(updated, Failure):
                raise updated.error
        except Exception as e:
            logger.warning(
                "Failed to update friend count for %s: %s", user_id.value, e
            )
