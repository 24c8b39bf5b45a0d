"""
Persistence Layer - Firestore implementations of the repository ports.
"""

from src.infrastructure.persistence.firestore_client import create_firestore_client
from src.infrastructure.persistence.firestore_user_repository import (
    FirestoreUserRepository,
)
from src.infrastructure.persistence.firestore_dm_channel_repository import (
    FirestoreDMChannelRepository,
)
from src.infrastructure.persistence.firestore_dm_wrapper_repository import (
    FirestoreDMWrapperRepository,
)
from src.infrastructure.persistence.firestore_friend_repository import (
    FirestoreFriendRepository,
)

__all__ = [
    "create_firestore_client",
    "FirestoreUserRepository",
    "FirestoreDMChannelRepository",
    "FirestoreDMWrapperRepository",
    "FirestoreFriendRepository",
]
