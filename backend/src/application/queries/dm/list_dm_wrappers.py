"""List DM Wrappers Query - the caller's DM inbox, most recent first."""

from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Query, QueryHandler
from src.application.dto.dm import DMWrapperDTO, DMWrapperListDTO
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import DMWrapperRepository
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListDMWrappersQuery(Query[DMWrapperListDTO]):
    user_id: str


class ListDMWrappersHandler(QueryHandler[DMWrapperListDTO]):
    def __init__(
        self,
        dm_wrapper_repository: DMWrapperRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._dm_wrapper_repository = dm_wrapper_repository
        self._observability = observability or NullObservability()

    @returns_result("list DM wrappers")
    async def execute(self, query: ListDMWrappersQuery) -> Result[DMWrapperListDTO]:
        require_fields(user_id=query.user_id)
        wrappers = (
            await self._dm_wrapper_repository.find_by_owner(UserId(query.user_id))
        ).unwrap()
        wrappers = sorted(wrappers, key=lambda w: w.updated_at, reverse=True)
        return Success(
            DMWrapperListDTO(
                wrappers=[DMWrapperDTO.from_entity(w) for w in wrappers],
                total=len(wrappers),
            )
        )
