"""Friend management commands."""

from .send_friend_request import SendFriendRequestCommand, SendFriendRequestHandler
from .accept_friend_request import (
    AcceptFriendRequestCommand,
    AcceptFriendRequestHandler,
)
from .reject_friend_request import (
    RejectFriendRequestCommand,
    RejectFriendRequestHandler,
)
from .remove_friend import RemoveFriendCommand, RemoveFriendHandler

__all__ = [
    "SendFriendRequestCommand",
    "SendFriendRequestHandler",
    "AcceptFriendRequestCommand",
    "AcceptFriendRequestHandler",
    "RejectFriendRequestCommand",
    "RejectFriendRequestHandler",
    "RemoveFriendCommand",
    "RemoveFriendHandler",
]
