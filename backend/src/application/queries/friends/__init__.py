"""Friend list queries."""

from src.application.queries.friends.get_friends import (
    GetFriendsQuery,
    GetFriendsHandler,
)
from src.application.queries.friends.get_friend_requests import (
    GetFriendRequestsQuery,
    GetFriendRequestsHandler,
)

__all__ = [
    "GetFriendsQuery",
    "GetFriendsHandler",
    "GetFriendRequestsQuery",
    "GetFriendRequestsHandler",
]
