"""
Send Friend Request Command.

Writes a PENDING_SENT side under the requester and a PENDING_RECEIVED side
under the receiver in a single batch. A REJECTED relationship may be asked
again; any other existing relationship blocks the request.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.friend import SendFriendRequestResult
from src.domain.entities.friend import Friend, FriendStatus
from src.domain.entities.user import User
from src.domain.exceptions import (
    AlreadyExistsError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendFriendRequestCommand(Command[SendFriendRequestResult]):
    requester_id: str
    receiver_user_id: str


class SendFriendRequestHandler(CommandHandler[SendFriendRequestResult]):
    def __init__(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._friend_repository = friend_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    @returns_result("send friend request")
    async def execute(
        self, command: SendFriendRequestCommand
    ) -> Result[SendFriendRequestResult]:
        require_fields(
            requester_id=command.requester_id,
            receiver_user_id=command.receiver_user_id,
        )
        requester_id = UserId(command.requester_id)
        receiver_id = UserId(command.receiver_user_id)
        if requester_id == receiver_id:
            raise ValidationError(
                "receiver_user_id", "Cannot send a friend request to yourself"
            )

        requester = await self._get_user(requester_id)
        receiver = await self._get_user(receiver_id)
        if not receiver.accepts_friend_requests:
            raise ConflictError(
                "User", "NOT_ACCEPTING", "User is not accepting friend requests"
            )

        await self._ensure_no_relationship(requester_id, receiver_id)
        await self._ensure_no_relationship(receiver_id, requester_id)

        sent, received = Friend.new_request_pair(requester, receiver)
        (await self._friend_repository.save_pair(sent, received)).unwrap()

        logger.info(
            "Friend request %s sent from %s to %s",
            sent.request_id,
            requester_id.value,
            receiver_id.value,
        )
        self._observability.record_event(
            "friend_request_sent", request_id=sent.request_id
        )

        return Success(
            SendFriendRequestResult(
                friend_request_id=sent.request_id,
                status=sent.status,
                requested_at=sent.requested_at,
            )
        )

    async def _get_user(self, user_id: UserId) -> User:
        user = (await self._user_repository.find_by_user_id(user_id)).unwrap()
        if user is None:
            raise NotFoundError("User", user_id.value)
        return user

    async def _ensure_no_relationship(self, owner_id: UserId, other_id: UserId) -> None:
        existing = (
            await self._friend_repository.find_by_users(owner_id, other_id)
        ).unwrap()
        if existing is None or existing.status is FriendStatus.REJECTED:
            return
        if existing.status is FriendStatus.ACCEPTED:
            raise AlreadyExistsError(
                "Friend", existing.status.value, "You are already friends"
            )
        if existing.is_pending():
            raise AlreadyExistsError(
                "FriendRequest", existing.status.value, "Friend request already exists"
            )
        raise ConflictError(
            "Friend", existing.status.value, "Cannot send a friend request to this user"
        )
