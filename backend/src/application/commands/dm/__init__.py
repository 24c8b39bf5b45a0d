"""DM channel commands."""

from .create_dm_channel import CreateDMChannelCommand, CreateDMChannelHandler
from .block_dm_channel import BlockDMChannelCommand, BlockDMChannelHandler
from .unblock_dm_channel import (
    UnblockDMChannelByUserNameCommand,
    UnblockDMChannelCommand,
    UnblockDMChannelHandler,
)

__all__ = [
    "CreateDMChannelCommand",
    "CreateDMChannelHandler",
    "BlockDMChannelCommand",
    "BlockDMChannelHandler",
    "UnblockDMChannelCommand",
    "UnblockDMChannelByUserNameCommand",
    "UnblockDMChannelHandler",
]
