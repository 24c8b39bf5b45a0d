from datetime import datetime, timezone

import pytest

from src.domain.entities import DMChannel, DMChannelStatus, DMWrapper
from src.domain.exceptions import ConflictError, ValidationCode, ValidationError
from src.domain.value_objects import UserId, UserName

U1, U2, U3 = UserId("u1"), UserId("u2"), UserId("u3")


@pytest.fixture()
def channel():
    return DMChannel.create_for_users(U2, U1)


def test_channel_id_is_order_independent():
    assert DMChannel.channel_id_for(U1, U2) == "dm_u1_u2"
    assert DMChannel.channel_id_for(U2, U1) == "dm_u1_u2"


def test_participants_are_stored_sorted(channel):
    assert channel.id == "dm_u1_u2"
    assert channel.participants == (U1, U2)
    assert channel.status is DMChannelStatus.ACTIVE
    assert channel.is_active()
    assert not channel.is_blocked()


def test_create_with_yourself_is_rejected():
    with pytest.raises(ValidationError):
        DMChannel.create_for_users(U1, U1)


def test_blocked_by_must_be_participants():
    with pytest.raises(ValidationError) as exc:
        DMChannel(id="dm_u1_u2", participants=(U1, U2), blocked_by=frozenset({U3}))
    assert exc.value.code is ValidationCode.NOT_PARTICIPANT


def test_get_other_participant(channel):
    assert channel.get_other_participant(U1) == U2
    assert channel.get_other_participant(U2) == U1
    with pytest.raises(ValidationError) as exc:
        channel.get_other_participant(U3)
    assert exc.value.code is ValidationCode.NOT_PARTICIPANT


def test_block_returns_new_channel(channel):
    blocked = channel.block(U1)

    assert blocked.status is DMChannelStatus.BLOCKED_BY_A
    assert blocked.is_blocked_by_user(U1)
    assert not blocked.is_blocked_by_user(U2)
    assert channel.is_active()


def test_block_status_per_side(channel):
    assert channel.block(U2).status is DMChannelStatus.BLOCKED_BY_B
    assert channel.block(U1).block(U2).status is DMChannelStatus.BLOCKED_BY_BOTH


def test_second_block_by_same_user_conflicts(channel):
    blocked = channel.block(U1)
    with pytest.raises(ConflictError) as exc:
        blocked.block(U1)
    assert exc.value.message == "Channel is already blocked by you"
    assert exc.value.conflicting_state == "BLOCKED_BY_A"


def test_outsider_cannot_block(channel):
    with pytest.raises(ValidationError) as exc:
        channel.block(U3)
    assert exc.value.code is ValidationCode.NOT_PARTICIPANT


def test_unblock_only_clears_own_flag(channel):
    both = channel.block(U1).block(U2)

    partially = both.unblock_by_user(U1)
    assert partially.status is DMChannelStatus.BLOCKED_BY_B
    assert not partially.is_active()

    fully = partially.unblock_by_user(U2)
    assert fully.is_active()


def test_unblock_without_own_block_conflicts(channel):
    blocked_by_other = channel.block(U2)
    with pytest.raises(ConflictError) as exc:
        blocked_by_other.unblock_by_user(U1)
    assert exc.value.message == "Channel is not blocked by you"


def test_block_sets_updated_at(channel):
    later = datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert channel.block(U1, now=later).updated_at == later
    assert channel.block(U1, now=later).created_at == channel.created_at


def test_wrapper_describes_other_user():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    wrapper = DMWrapper.create_for_users(
        "dm_u1_u2", U2, UserName("bob"), "https://img.example.com/bob.png", now=now
    )
    assert wrapper.other_user_id == U2
    assert wrapper.other_user_name.value == "bob"
    assert wrapper.last_message_preview is None
    assert wrapper.created_at == wrapper.updated_at == now
