"""
Create DM Channel Command.

Opens a one-to-one channel between the caller and the user with the given
display name, then writes an inbox wrapper for each participant pointing at
the other one. A second create for the same pair fails; it never returns the
existing channel.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.application.common.boundary import returns_result
from src.application.common.guards import require_fields
from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.dm import CreateDMChannelResult
from src.domain.entities.dm_channel import DMChannel
from src.domain.entities.dm_wrapper import DMWrapper
from src.domain.exceptions import AlreadyExistsError, NotFoundError, ValidationError
from src.domain.ports.observability import NullObservability, ObservabilityPort
from src.domain.ports.repositories import (
    DMChannelRepository,
    DMWrapperRepository,
    UserRepository,
)
from src.domain.result import Result, Success
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_name import UserName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateDMChannelCommand(Command[CreateDMChannelResult]):
    current_user_id: str
    target_user_name: str


class CreateDMChannelHandler(CommandHandler[CreateDMChannelResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        observability: Optional[ObservabilityPort] = None,
    ):
        self._user_repository = user_repository
        self._dm_channel_repository = dm_channel_repository
        self._dm_wrapper_repository = dm_wrapper_repository
        self._observability = observability or NullObservability()

    @returns_result("create DM channel")
    async def execute(
        self, command: CreateDMChannelCommand
    ) -> Result[CreateDMChannelResult]:
        require_fields(
            current_user_id=command.current_user_id,
            target_user_name=command.target_user_name,
        )

        current_user_id = UserId(command.current_user_id)
        current_user = (
            await self._user_repository.find_by_user_id(current_user_id)
        ).unwrap()
        if current_user is None:
            raise NotFoundError("User", current_user_id.value)

        target_user = (
            await self._user_repository.find_by_name(UserName(command.target_user_name))
        ).unwrap()
        if target_user is None:
            raise NotFoundError("User", command.target_user_name)

        if target_user.id == current_user.id:
            raise ValidationError(
                "target_user_name", "Cannot create a DM channel with yourself"
            )

        existing = (
            await self._dm_channel_repository.find_by_participants(
                current_user.id, target_user.id
            )
        ).unwrap()
        if existing is not None:
            raise AlreadyExistsError(
                "DMChannel", existing.status.value, "DM channel already exists"
            )

        channel = DMChannel.create_for_users(current_user.id, target_user.id)
        (await self._dm_channel_repository.save(channel)).unwrap()

        # One wrapper per side, each describing the other participant
        for owner, other in ((current_user, target_user), (target_user, current_user)):
            wrapper = DMWrapper.create_for_users(
                channel.id,
                other.id,
                other.name,
                other.profile_image_url,
                now=channel.created_at,
            )
            (await self._dm_wrapper_repository.save(owner.id, wrapper)).unwrap()

        logger.info(
            "DM channel %s created by %s", channel.id, current_user.id.value
        )
        self._observability.record_event("dm_channel_created", channel_id=channel.id)

        return Success(
            CreateDMChannelResult(
                channel_id=channel.id,
                other_user_id=target_user.id.value,
                other_user_name=target_user.name.value,
                other_user_image_url=target_user.profile_image_url,
            )
        )
