"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- friends/ → get_friends, get_friend_requests
- dm/      → list_dm_wrappers
"""

from src.application.queries.friends import (
    GetFriendsQuery,
    GetFriendsHandler,
    GetFriendRequestsQuery,
    GetFriendRequestsHandler,
)
from src.application.queries.dm import ListDMWrappersQuery, ListDMWrappersHandler

__all__ = [
    # friends
    "GetFriendsQuery",
    "GetFriendsHandler",
    "GetFriendRequestsQuery",
    "GetFriendRequestsHandler",
    # dm
    "ListDMWrappersQuery",
    "ListDMWrappersHandler",
]
