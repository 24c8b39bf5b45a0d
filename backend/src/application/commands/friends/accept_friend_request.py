"""
Accept Friend Request Command.

Only the receiver can accept. Both sides move to ACCEPTED in one batch, then
both users' friend counts are refreshed (best-effort).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.commands.friends.friend_counts import refresh_friend_counts
from src.application.commands.friends.respond_to_friend_request import (
    FriendRequestResponder,
)
from src.application.common.boundary import returns_result
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.friend import AcceptFriendRequestResult
from src.domain.result import Result, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AcceptFriendRequestCommand(Command[AcceptFriendRequestResult]):
    friend_request_id: str
    user_id: str


class AcceptFriendRequestHandler(
    FriendRequestResponder, CommandHandler[AcceptFriendRequestResult]
):
    action = "accept"

    @returns_result("accept friend request")
    async def execute(
        self, command: AcceptFriendRequestCommand
    ) -> Result[AcceptFriendRequestResult]:
        pending = await self._load_pending(command.friend_request_id, command.user_id)

        now = datetime.now(timezone.utc)
        received = pending.received.accept(now)
        sent = pending.sent.accept(now)
        (await self._friend_repository.save_pair(received, sent)).unwrap()
        await refresh_friend_counts(
            self._friend_repository,
            self._user_repository,
            (received.owner_id, received.friend_user_id),
        )

        logger.info(
            "Friend request %s accepted by %s",
            received.request_id,
            received.owner_id.value,
        )
        self._observability.record_event(
            "friend_request_accepted", request_id=received.request_id
        )

        return Success(
            AcceptFriendRequestResult(
                friend_request_id=received.request_id,
                status=received.status,
                accepted_at=now,
                friend_user_id=received.friend_user_id.value,
            )
        )
