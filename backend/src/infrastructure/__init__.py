"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Firestore implementations of the repository ports
"""

from src.infrastructure.persistence import (
    FirestoreDMChannelRepository,
    FirestoreDMWrapperRepository,
    FirestoreFriendRepository,
    FirestoreUserRepository,
    create_firestore_client,
)

__all__ = [
    "create_firestore_client",
    "FirestoreUserRepository",
    "FirestoreDMChannelRepository",
    "FirestoreDMWrapperRepository",
    "FirestoreFriendRepository",
]
