"""
Remove Friend Command.

Deletes both sides of an ACCEPTED relationship in one batch, then refreshes
both users' friend counts (best-effort).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.application.commands.friends.friend_counts import refresh_friend_counts
from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.friend import RemoveFriendResult
from src.domain.exceptions import ConflictError, NotFoundError, ValidationError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveFriendCommand(Command[RemoveFriendResult]):
    user_id: str
    friend_user_id: str


class RemoveFriendHandler(CommandHandler[RemoveFriendResult]):
    def __init__(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._friend_repository = friend_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    @returns_result("remove friend")
    async def execute(self, command: RemoveFriendCommand) -> Result[RemoveFriendResult]:
        require_fields(user_id=command.user_id, friend_user_id=command.friend_user_id)
        user_id = UserId(command.user_id)
        friend_user_id = UserId(command.friend_user_id)
        if user_id == friend_user_id:
            raise ValidationError("friend_user_id", "Cannot remove yourself as a friend")

        for uid in (user_id, friend_user_id):
            user = (await self._user_repository.find_by_user_id(uid)).unwrap()
            if user is None:
                raise NotFoundError("User", uid.value)

        relation = (
            await self._friend_repository.find_by_users(user_id, friend_user_id)
        ).unwrap()
        if relation is None or not relation.is_active():
            state = relation.status.value if relation else "NONE"
            raise ConflictError("Friend", state, "You are not friends with this user")

        (await self._friend_repository.delete_pair(user_id, friend_user_id)).unwrap()
        await refresh_friend_counts(
            self._friend_repository, self._user_repository, (user_id, friend_user_id)
        )

        logger.info("Friendship between %s and %s removed", user_id.value, friend_user_id.value)
        self._observability.record_event("friend_removed")

        return Success(
            RemoveFriendResult(success=True, removed_at=datetime.now(timezone.utc))
        )
