"""Shared loading and validation for accepting or rejecting a request."""

from dataclasses import dataclass
from typing import Optional

from src.application.common.guards import require_fields
from src.domain.entities.friend import Friend, FriendStatus
from src.domain.exceptions import AccessDeniedError, ConflictError, NotFoundError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class PendingRequest:
    received: Friend  # side owned by the acting user
    sent: Friend  # counterpart owned by the requester


class FriendRequestResponder:
    """Base for handlers that answer a received friend request."""

    action = "respond to"

    def __init__(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._friend_repository = friend_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    async def _load_pending(self, friend_request_id: str, user_id: str) -> PendingRequest:
        require_fields(friend_request_id=friend_request_id, user_id=user_id)
        acting_id = UserId(user_id)

        user = (await self._user_repository.find_by_user_id(acting_id)).unwrap()
        if user is None:
            raise NotFoundError("User", acting_id.value)

        request = (
            await self._friend_repository.find_by_request_id(acting_id, friend_request_id)
        ).unwrap()
        if request is None:
            # Held by other users only: the caller is neither requester nor receiver
            if (await self._friend_repository.request_exists(friend_request_id)).unwrap():
                raise AccessDeniedError(
                    f"Only the request receiver can {self.action} this friend request"
                )
            raise NotFoundError("FriendRequest", friend_request_id)

        if request.is_requester(acting_id):
            raise AccessDeniedError(
                f"Only the receiver can {self.action} this friend request"
            )
        if request.status is not FriendStatus.PENDING_RECEIVED:
            raise ConflictError(
                "FriendRequest",
                request.status.value,
                f"Cannot {self.action} friend request. Current status: {request.status.value}",
            )

        counterpart = (
            await self._friend_repository.find_by_users(request.friend_user_id, acting_id)
        ).unwrap()
        if counterpart is None or not counterpart.is_pending():
            # Requester side is missing or out of sync; rebuild it from ours
            counterpart = request.mirror(user)

        return PendingRequest(received=request, sent=counterpart)
