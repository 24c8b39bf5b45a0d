"""
Unblock DM Channel Command.

Two entry points:
- execute(): by channel id
- execute_by_user_name(): by the other participant's display name

Only the caller's own block flag is cleared and only the caller's inbox
wrapper is recreated. The other side's wrapper stays deleted until that user
unblocks too; `is_fully_unblocked` tells the caller which case applies.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.dm import UnblockDMChannelResult
from src.domain.entities.dm_channel import DMChannel
from src.domain.entities.dm_wrapper import DMWrapper
from src.domain.exceptions import NotFoundError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import (
    DMChannelRepository,
    DMWrapperRepository,
    UserRepository,
)
from src.domain.result import Failure, Result, Success
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName

logger = logging.getLogger(__name__)

FULLY_UNBLOCKED_MESSAGE = "DM channel has been fully unblocked and is now active"
PARTIALLY_UNBLOCKED_MESSAGE = (
    "You have unblocked this DM channel, but it remains blocked by the other user"
)


@dataclass(frozen=True)
class UnblockDMChannelCommand(Command[UnblockDMChannelResult]):
    current_user_id: str
    channel_id: str


@dataclass(frozen=True)
class UnblockDMChannelByUserNameCommand(Command[UnblockDMChannelResult]):
    current_user_id: str
    target_user_name: str


class UnblockDMChannelHandler(CommandHandler[UnblockDMChannelResult]):
    def __init__(
        self,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        user_repository: UserRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._dm_channel_repository = dm_channel_repository
        self._dm_wrapper_repository = dm_wrapper_repository
        self._user_repository = user_repository
        self._observability = observability or NullObservability()

    @returns_result("unblock DM channel")
    async def execute(
        self, command: UnblockDMChannelCommand
    ) -> Result[UnblockDMChannelResult]:
        require_fields(
            current_user_id=command.current_user_id, channel_id=command.channel_id
        )
        current_user_id = UserId(command.current_user_id)

        channel = (
            await self._dm_channel_repository.find_by_id(command.channel_id)
        ).unwrap()
        if channel is None:
            raise NotFoundError("DMChannel", command.channel_id)

        return Success(await self._unblock(channel, current_user_id))

    @returns_result("unblock DM channel by user name")
    async def execute_by_user_name(
        self, command: UnblockDMChannelByUserNameCommand
    ) -> Result[UnblockDMChannelResult]:
        require_fields(
            current_user_id=command.current_user_id,
            target_user_name=command.target_user_name,
        )
        current_user_id = UserId(command.current_user_id)

        target_user = (
            await self._user_repository.find_by_name(UserName(command.target_user_name))
        ).unwrap()
        if target_user is None:
            raise NotFoundError("User", command.target_user_name)

        channel = (
            await self._dm_channel_repository.find_by_participants(
                current_user_id, target_user.id
            )
        ).unwrap()
        if channel is None:
            raise NotFoundError(
                "DMChannel", DMChannel.channel_id_for(current_user_id, target_user.id)
            )

        return Success(await self._unblock(channel, current_user_id))

    async def _unblock(
        self, channel: DMChannel, current_user_id: UserId
    ) -> UnblockDMChannelResult:
        # Raises ValidationError for outsiders, ConflictError if the caller never blocked
        unblocked = channel.unblock_by_user(current_user_id)
        (await self._dm_channel_repository.save(unblocked)).unwrap()

        other_user_id = unblocked.get_other_participant(current_user_id)
        await self._restore_wrapper(current_user_id, other_user_id, unblocked.id)

        is_fully_unblocked = unblocked.is_active()
        logger.info(
            "DM channel %s unblocked by %s (fully unblocked: %s)",
            unblocked.id,
            current_user_id.value,
            is_fully_unblocked,
        )
        self._observability.record_event(
            "dm_channel_unblocked",
            channel_id=unblocked.id,
            status=unblocked.status.value,
        )

        return UnblockDMChannelResult(
            channel_id=unblocked.id,
            success=True,
            message=(
                FULLY_UNBLOCKED_MESSAGE
                if is_fully_unblocked
                else PARTIALLY_UNBLOCKED_MESSAGE
            ),
            is_fully_unblocked=is_fully_unblocked,
        )

    async def _restore_wrapper(
        self, owner_id: UserId, other_user_id: UserId, channel_id: str
    ) -> None:
        """Recreate the caller's inbox wrapper; failures are logged, not raised."""
        try:
            other_result = await self._user_repository.find_by_user_id(other_user_id)
            if isinstance(other_result, Failure):
                raise other_result.error
            other_user = other_result.data
            if other_user is None:
                raise NotFoundError("User", other_user_id.value)

            wrapper = DMWrapper.create_for_users(
                channel_id,
                other_user.id,
                other_user.name,
                other_user.profile_image_url,
            )
            saved = await self._dm_wrapper_repository.save(owner_id, wrapper)
            if isinstance(saved, Failure):
                raise saved.error
        except Exception as e:
            logger.warning(
                "Failed to recreate DM wrapper %s for %s: %s",
                channel_id,
                owner_id.value,
                e,
            )
