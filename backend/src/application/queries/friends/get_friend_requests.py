"""
Get Friend Requests Query.

type="received" lists PENDING_RECEIVED sides, type="sent" lists PENDING_SENT.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Query, QueryHandler
from src.application.dto.friend import FriendRequestListDTO
from src.application.queries.friends.listing import (
    DEFAULT_PAGE_LIMIT,
    check_page,
    ensure_user_exists,
    load_page,
)
from src.domain.entities.friend import FriendStatus
from src.domain.exceptions import ValidationError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import FriendRepository, UserRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId

REQUEST_TYPES = {
    "received": FriendStatus.PENDING_RECEIVED,
    "sent": FriendStatus.PENDING_SENT,
}


@dataclass(frozen=True)
class GetFriendRequestsQuery(Query[FriendRequestListDTO]):
    user_id: str
    type: str = "received"
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


class GetFriendRequestsHandler(QueryHandler[FriendRequestListDTO]):
    def __init__(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._friend_repository = friend_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    @returns_result("get friend requests")
    async def execute(
        self, query: GetFriendRequestsQuery
    ) -> Result[FriendRequestListDTO]:
        require_fields(user_id=query.user_id, type=query.type)
        if query.type not in REQUEST_TYPES:
            raise ValidationError("type", "type must be 'received' or 'sent'")
        check_page(query.limit, query.offset)

        user_id = UserId(query.user_id)
        await ensure_user_exists(self._user_repository, user_id)

        requests, total = await load_page(
            self._friend_repository,
            user_id,
            [REQUEST_TYPES[query.type]],
            query.limit,
            query.offset,
        )
        return Success(
            FriendRequestListDTO(
                friends=requests,
                total=total,
                limit=query.limit,
                offset=query.offset,
                has_more=query.offset + len(requests) < total,
                type=query.type,
            )
        )
