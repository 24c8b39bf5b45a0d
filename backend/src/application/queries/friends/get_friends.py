"""Get Friends Query."""

from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Query, QueryHandler
from src.application.dto.friend import FriendListDTO
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


@dataclass(frozen=True)
class GetFriendsQuery(Query[FriendListDTO]):
    user_id: str
    status: Optional[str] = None  # defaults to ACCEPTED
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


class GetFriendsHandler(QueryHandler[FriendListDTO]):
    def __init__(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._friend_repository = friend_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    @returns_result("get friends")
    async def execute(self, query: GetFriendsQuery) -> Result[FriendListDTO]:
        require_fields(user_id=query.user_id)
        status = self._parse_status(query.status)
        check_page(query.limit, query.offset)

        user_id = UserId(query.user_id)
        await ensure_user_exists(self._user_repository, user_id)

        friends, total = await load_page(
            self._friend_repository, user_id, [status], query.limit, query.offset
        )
        return Success(
            FriendListDTO(
                friends=friends,
                total=total,
                limit=query.limit,
                offset=query.offset,
                has_more=query.offset + len(friends) < total,
            )
        )

    @staticmethod
    def _parse_status(raw: Optional[str]) -> FriendStatus:
        if raw is None or not raw.strip():
            return FriendStatus.ACCEPTED
        try:
            return FriendStatus(raw.strip().upper())
        except ValueError:
            raise ValidationError("status", f"Unknown friend status: {raw}") from None
