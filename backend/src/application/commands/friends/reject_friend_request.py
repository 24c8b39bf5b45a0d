"""
Reject Friend Request Command.

Only the receiver can reject. Both sides move to REJECTED in one batch; the
requester may send a new request later.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from src.application.commands.friends.respond_to_friend_request import (
    FriendRequestResponder,
)
from src.application.common.boundary import returns_result
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.friend import RejectFriendRequestResult
from src.domain.result import Result, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectFriendRequestCommand(Command[RejectFriendRequestResult]):
    friend_request_id: str
    user_id: str


class RejectFriendRequestHandler(
    FriendRequestResponder, CommandHandler[RejectFriendRequestResult]
):
    action = "reject"

    @returns_result("reject friend request")
    async def execute(
        self, command: RejectFriendRequestCommand
    ) -> Result[RejectFriendRequestResult]:
        pending = await self._load_pending(command.friend_request_id, command.user_id)

        now = datetime.now(timezone.utc)
        received = pending.received.reject(now)
        sent = pending.sent.reject(now)
        (await self._friend_repository.save_pair(received, sent)).unwrap()

        logger.info(
            "Friend request %s rejected by %s",
            received.request_id,
            received.owner_id.value,
        )
        self._observability.record_event(
            "friend_request_rejected", request_id=received.request_id
        )

        return Success(
            RejectFriendRequestResult(
                friend_request_id=received.request_id,
                status=received.status,
                rejected_at=now,
            )
        )
