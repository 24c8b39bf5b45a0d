"""
Block DM Channel Command.

Sets the caller's block flag and removes the channel from both participants'
inboxes. Inbox cleanup is best-effort: a failed wrapper delete is logged and
the block still succeeds.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.dm import BlockDMChannelResult
from src.domain.exceptions import NotFoundError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import DMChannelRepository, DMWrapperRepository
from src.domain.result import Failure, Result, Success
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockDMChannelCommand(Command[BlockDMChannelResult]):
    current_user_id: str
    channel_id: str


class BlockDMChannelHandler(CommandHandler[BlockDMChannelResult]):
    def __init__(
        self,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._dm_channel_repository = dm_channel_repository
        self._dm_wrapper_repository = dm_wrapper_repository
        self._observability = observability or NullObservability()

    @returns_result("block DM channel")
    async def execute(
        self, command: BlockDMChannelCommand
    ) -> Result[BlockDMChannelResult]:
        require_fields(
            current_user_id=command.current_user_id, channel_id=command.channel_id
        )
        current_user_id = UserId(command.current_user_id)

        channel = (
            await self._dm_channel_repository.find_by_id(command.channel_id)
        ).unwrap()
        if channel is None:
            raise NotFoundError("DMChannel", command.channel_id)

        # Raises ValidationError for outsiders, ConflictError on a repeat block
        blocked = channel.block(current_user_id)
        (await self._dm_channel_repository.save(blocked)).unwrap()

        await self._remove_wrappers(blocked.participants, blocked.id)

        logger.info("DM channel %s blocked by %s", blocked.id, current_user_id.value)
        self._observability.record_event(
            "dm_channel_blocked", channel_id=blocked.id, status=blocked.status.value
        )

        return Success(
            BlockDMChannelResult(
                channel_id=blocked.id,
                success=True,
                message="DM channel has been blocked",
            )
        )

    async def _remove_wrappers(self, owners: tuple[UserId, ...], channel_id: str) -> None:
        results = await asyncio.gather(
            *(self._dm_wrapper_repository.delete(owner, channel_id) for owner in owners),
            return_exceptions=True,
        )
        for owner, result in zip(owners, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Failed to delete DM wrapper %s for %s: %s",
                    channel_id,
                    owner.value,
                    result,
                )
            elif isinstance(result, Failure):
                logger.warning(
                    "Failed to delete DM wrapper %s for %s: %s",
                    channel_id,
                    owner.value,
                    result.error.message,
                )
