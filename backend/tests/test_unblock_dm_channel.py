import pytest

from src.application.commands.dm import (
    UnblockDMChannelByUserNameCommand,
    UnblockDMChannelCommand,
    UnblockDMChannelHandler,
)
from src.application.commands.dm.unblock_dm_channel import (
    FULLY_UNBLOCKED_MESSAGE,
    PARTIALLY_UNBLOCKED_MESSAGE,
)
from src.domain.entities import DMChannel, DMChannelStatus
from src.domain.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationCode,
    ValidationError,
)


@pytest.fixture()
def handler(dm_channel_repository, dm_wrapper_repository, user_repository, observability):
    return UnblockDMChannelHandler(
        dm_channel_repository, dm_wrapper_repository, user_repository, observability
    )


def _store(repo, channel):
    repo.channels[channel.id] = channel
    return channel


@pytest.mark.asyncio
async def test_unblock_restores_only_callers_inbox(
    handler, dm_channel_repository, dm_wrapper_repository, alice, bob
):
    channel = _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(alice.id),
    )

    result = await handler.execute(UnblockDMChannelCommand("u1", channel.id))

    assert result.success
    assert result.data.is_fully_unblocked is True
    assert result.data.message == FULLY_UNBLOCKED_MESSAGE
    assert dm_channel_repository.channels[channel.id].is_active()

    restored = dm_wrapper_repository.get("u1", channel.id)
    assert restored.other_user_id == bob.id
    assert restored.other_user_name == bob.name
    assert restored.other_user_image_url == bob.profile_image_url
    assert dm_wrapper_repository.get("u2", channel.id) is None


@pytest.mark.asyncio
async def test_partial_unblock_when_other_side_still_blocks(
    handler, dm_channel_repository, dm_wrapper_repository, alice, bob
):
    channel = _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(alice.id).block(bob.id),
    )

    result = await handler.execute(UnblockDMChannelCommand("u1", channel.id))

    assert result.success
    assert result.data.is_fully_unblocked is False
    assert result.data.message == PARTIALLY_UNBLOCKED_MESSAGE
    assert dm_channel_repository.channels[channel.id].status is (
        DMChannelStatus.BLOCKED_BY_B
    )
    assert dm_wrapper_repository.get("u1", channel.id) is not None


@pytest.mark.asyncio
async def test_cannot_lift_the_other_users_block(
    handler, dm_channel_repository, alice, bob
):
    channel = _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(bob.id),
    )

    result = await handler.execute(UnblockDMChannelCommand("u1", channel.id))

    assert isinstance(result.error, ConflictError)
    assert result.error.message == "Channel is not blocked by you"
    assert dm_channel_repository.saves == []


@pytest.mark.asyncio
async def test_unknown_channel(handler):
    result = await handler.execute(UnblockDMChannelCommand("u1", "dm_u1_u2"))
    assert isinstance(result.error, NotFoundError)


@pytest.mark.asyncio
async def test_outsider_cannot_unblock(handler, dm_channel_repository, alice, bob):
    channel = _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(alice.id),
    )

    result = await handler.execute(UnblockDMChannelCommand("u3", channel.id))

    assert isinstance(result.error, ValidationError)
    assert result.error.code is ValidationCode.NOT_PARTICIPANT


@pytest.mark.asyncio
async def test_wrapper_restore_failure_is_not_fatal(
    handler, dm_channel_repository, dm_wrapper_repository, alice, bob
):
    channel = _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(alice.id),
    )
    dm_wrapper_repository.fail_save = True

    result = await handler.execute(UnblockDMChannelCommand("u1", channel.id))

    assert result.success
    assert dm_channel_repository.channels[channel.id].is_active()
    assert dm_wrapper_repository.get("u1", channel.id) is None


@pytest.mark.asyncio
async def test_unblock_by_user_name(handler, dm_channel_repository, alice, bob):
    _store(
        dm_channel_repository,
        DMChannel.create_for_users(alice.id, bob.id).block(bob.id),
    )

    result = await handler.execute_by_user_name(
        UnblockDMChannelByUserNameCommand("u2", "alice")
    )

    assert result.success
    assert result.data.channel_id == "dm_u1_u2"
    assert result.data.is_fully_unblocked is True


@pytest.mark.asyncio
async def test_unblock_by_user_name_unknown_user(handler):
    result = await handler.execute_by_user_name(
        UnblockDMChannelByUserNameCommand("u1", "nobody")
    )
    assert isinstance(result.error, NotFoundError)
    assert "User" in result.error.message


@pytest.mark.asyncio
async def test_unblock_by_user_name_without_channel(handler):
    result = await handler.execute_by_user_name(
        UnblockDMChannelByUserNameCommand("u1", "bob")
    )
    assert isinstance(result.error, NotFoundError)
    assert result.error.resource == "DMChannel"


@pytest.mark.asyncio
async def test_unblock_by_user_name_requires_fields(handler):
    result = await handler.execute_by_user_name(
        UnblockDMChannelByUserNameCommand("u1", "")
    )
    assert result.error.code is ValidationCode.REQUIRED
    assert result.error.field == "target_user_name"
