"""
Dishka DI Container Setup.

- Registers all dependencies (Firestore client, repositories, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Providers:
- FirestoreProvider: AsyncClient (APP) and Firestore repositories (REQUEST)
- UseCaseProvider: observability port (APP) and command/query handlers (REQUEST)

Tests replace FirestoreProvider with an in-memory provider that exposes the
same repository ports.

Flow:
  Container → provides → FirestoreFriendRepository → to → SendFriendRequestHandler
                                    ↓
                            uses FriendRepository port
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from google.cloud.firestore import AsyncClient

from src.application.commands.dm import (
    BlockDMChannelHandler,
    CreateDMChannelHandler,
    UnblockDMChannelHandler,
)
from src.application.commands.friends import (
    AcceptFriendRequestHandler,
    RejectFriendRequestHandler,
    RemoveFriendHandler,
    SendFriendRequestHandler,
)
from src.application.queries.dm import ListDMWrappersHandler
from src.application.queries.friends import (
    GetFriendRequestsHandler,
    GetFriendsHandler,
)
from src.config.settings import Config
from src.domain.ports.observability import ObservabilityPort
from src.domain.ports.repositories import (
    DMChannelRepository,
    DMWrapperRepository,
    FriendRepository,
    UserRepository,
)
from src.infrastructure.persistence import (
    FirestoreDMChannelRepository,
    FirestoreDMWrapperRepository,
    FirestoreFriendRepository,
    FirestoreUserRepository,
    create_firestore_client,
)
from src.observability.telemetry import PrometheusObservability


class FirestoreProvider(Provider):
    """Firestore-backed repository ports."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    def get_firestore(self) -> AsyncClient:
        """
        Provide the async Firestore client (singleton, app-scoped).

        Initializes the firebase_admin default app on first use.
        """
        return create_firestore_client(
            credentials_path=Config.FIREBASE_CREDENTIALS_PATH or None,
            project_id=Config.FIREBASE_PROJECT_ID or None,
        )

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, db: AsyncClient) -> UserRepository:
        return FirestoreUserRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_dm_channel_repository(self, db: AsyncClient) -> DMChannelRepository:
        return FirestoreDMChannelRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_dm_wrapper_repository(self, db: AsyncClient) -> DMWrapperRepository:
        return FirestoreDMWrapperRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_friend_repository(self, db: AsyncClient) -> FriendRepository:
        return FirestoreFriendRepository(db)


class UseCaseProvider(Provider):
    """Command and query handlers, wired to whichever repository provider is installed."""

    @provide(scope=Scope.APP)
    def get_observability(self) -> ObservabilityPort:
        return PrometheusObservability()

    # ==================== DM HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_dm_channel_handler(
        self,
        user_repository: UserRepository,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        observability: ObservabilityPort,
    ) -> CreateDMChannelHandler:
        return CreateDMChannelHandler(
            user_repository, dm_channel_repository, dm_wrapper_repository, observability
        )

    @provide(scope=Scope.REQUEST)
    def get_block_dm_channel_handler(
        self,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        observability: ObservabilityPort,
    ) -> BlockDMChannelHandler:
        return BlockDMChannelHandler(
            dm_channel_repository, dm_wrapper_repository, observability
        )

    @provide(scope=Scope.REQUEST)
    def get_unblock_dm_channel_handler(
        self,
        dm_channel_repository: DMChannelRepository,
        dm_wrapper_repository: DMWrapperRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> UnblockDMChannelHandler:
        return UnblockDMChannelHandler(
            dm_channel_repository, dm_wrapper_repository, user_repository, observability
        )

    @provide(scope=Scope.REQUEST)
    def get_list_dm_wrappers_handler(
        self,
        dm_wrapper_repository: DMWrapperRepository,
        observability: ObservabilityPort,
    ) -> ListDMWrappersHandler:
        return ListDMWrappersHandler(dm_wrapper_repository, observability)

    # ==================== FRIEND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_friend_request_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> SendFriendRequestHandler:
        return SendFriendRequestHandler(friend_repository, user_repository, observability)

    @provide(scope=Scope.REQUEST)
    def get_accept_friend_request_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> AcceptFriendRequestHandler:
        return AcceptFriendRequestHandler(
            friend_repository, user_repository, observability
        )

    @provide(scope=Scope.REQUEST)
    def get_reject_friend_request_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> RejectFriendRequestHandler:
        return RejectFriendRequestHandler(
            friend_repository, user_repository, observability
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_friend_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> RemoveFriendHandler:
        return RemoveFriendHandler(friend_repository, user_repository, observability)

    @provide(scope=Scope.REQUEST)
    def get_friends_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> GetFriendsHandler:
        return GetFriendsHandler(friend_repository, user_repository, observability)

    @provide(scope=Scope.REQUEST)
    def get_friend_requests_handler(
        self,
        friend_repository: FriendRepository,
        user_repository: UserRepository,
        observability: ObservabilityPort,
    ) -> GetFriendRequestsHandler:
        return GetFriendRequestsHandler(
            friend_repository, user_repository, observability
        )


def create_container() -> AsyncContainer:
    return make_async_container(FirestoreProvider(), UseCaseProvider())
