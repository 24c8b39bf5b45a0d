import pytest

from src.application.commands.dm import CreateDMChannelCommand, CreateDMChannelHandler
from src.domain.entities import DMChannel
from src.domain.exceptions import (
    AlreadyExistsError,
    InternalError,
    NotFoundError,
    ValidationCode,
    ValidationError,
)


@pytest.fixture()
def handler(user_repository, dm_channel_repository, dm_wrapper_repository, observability):
    return CreateDMChannelHandler(
        user_repository, dm_channel_repository, dm_wrapper_repository, observability
    )


@pytest.mark.asyncio
async def test_creates_channel_and_both_wrappers(
    handler, dm_channel_repository, dm_wrapper_repository, observability, alice, bob
):
    result = await handler.execute(CreateDMChannelCommand("u1", "bob"))

    assert result.success
    assert result.data.channel_id == "dm_u1_u2"
    assert result.data.other_user_id == "u2"
    assert result.data.other_user_name == "bob"
    assert result.data.other_user_image_url == bob.profile_image_url

    channel = dm_channel_repository.channels["dm_u1_u2"]
    assert channel.is_active()
    assert channel.participants == (alice.id, bob.id)

    alice_inbox = dm_wrapper_repository.get("u1", "dm_u1_u2")
    assert alice_inbox.other_user_id == bob.id
    assert alice_inbox.other_user_name.value == "bob"
    bob_inbox = dm_wrapper_repository.get("u2", "dm_u1_u2")
    assert bob_inbox.other_user_id == alice.id
    assert bob_inbox.other_user_image_url == alice.profile_image_url

    assert observability.events == [("dm_channel_created", {"channel_id": "dm_u1_u2"})]


@pytest.mark.asyncio
async def test_second_create_for_same_pair_fails(
    handler, dm_channel_repository, dm_wrapper_repository
):
    await handler.execute(CreateDMChannelCommand("u1", "bob"))
    writes_before = dm_wrapper_repository.writes

    # Reverse direction hits the same canonical channel
    result = await handler.execute(CreateDMChannelCommand("u2", "alice"))

    assert not result.success
    assert isinstance(result.error, AlreadyExistsError)
    assert len(dm_channel_repository.saves) == 1
    assert dm_wrapper_repository.writes == writes_before


@pytest.mark.parametrize(
    "command, field",
    [
        (CreateDMChannelCommand("", "bob"), "current_user_id"),
        (CreateDMChannelCommand("u1", ""), "target_user_name"),
        (CreateDMChannelCommand("u1", "   "), "target_user_name"),
    ],
)
@pytest.mark.asyncio
async def test_missing_fields_write_nothing(
    handler, dm_channel_repository, dm_wrapper_repository, command, field
):
    result = await handler.execute(command)

    assert isinstance(result.error, ValidationError)
    assert result.error.code is ValidationCode.REQUIRED
    assert result.error.field == field
    assert dm_channel_repository.saves == []
    assert dm_wrapper_repository.writes == 0


@pytest.mark.asyncio
async def test_unknown_current_user(handler):
    result = await handler.execute(CreateDMChannelCommand("ghost", "bob"))
    assert isinstance(result.error, NotFoundError)


@pytest.mark.asyncio
async def test_unknown_target(handler, dm_channel_repository):
    result = await handler.execute(CreateDMChannelCommand("u1", "nobody"))
    assert isinstance(result.error, NotFoundError)
    assert dm_channel_repository.saves == []


@pytest.mark.asyncio
async def test_malformed_target_name(handler):
    result = await handler.execute(CreateDMChannelCommand("u1", "bad!name"))
    assert isinstance(result.error, ValidationError)
    assert result.error.code is ValidationCode.INVALID_FORMAT


@pytest.mark.asyncio
async def test_dm_with_yourself(handler, dm_channel_repository):
    result = await handler.execute(CreateDMChannelCommand("u1", "alice"))
    assert isinstance(result.error, ValidationError)
    assert dm_channel_repository.saves == []


@pytest.mark.asyncio
async def test_repository_failure_propagates(handler, user_repository):
    user_repository.fail = True
    result = await handler.execute(CreateDMChannelCommand("u1", "bob"))
    assert isinstance(result.error, InternalError)


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_internal_error(
    handler, dm_channel_repository, observability, monkeypatch
):
    async def boom(channel):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(dm_channel_repository, "save", boom)

    result = await handler.execute(CreateDMChannelCommand("u1", "bob"))

    assert isinstance(result.error, InternalError)
    assert result.error.message == "Failed to create DM channel"
    assert "disk on fire" not in result.error.message
    assert len(observability.errors) == 1


@pytest.mark.asyncio
async def test_existing_blocked_channel_still_blocks_create(
    handler, dm_channel_repository, alice, bob
):
    dm_channel_repository.channels["dm_u1_u2"] = DMChannel.create_for_users(
        alice.id, bob.id
    ).block(bob.id)

    result = await handler.execute(CreateDMChannelCommand("u1", "bob"))

    assert isinstance(result.error, AlreadyExistsError)
    assert result.error.conflicting_state == "BLOCKED_BY_B"


@pytest.mark.asyncio
async def test_target_name_must_match_stored_spelling(handler, dm_channel_repository):
    result = await handler.execute(CreateDMChannelCommand("u1", "BOB"))

    assert isinstance(result.error, NotFoundError)
    assert dm_channel_repository.saves == []
