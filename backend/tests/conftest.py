import time

import jwt
import pytest
from dishka import Provider, Scope, make_async_container, provide

# Import FastAPI app
from fastapi.testclient import TestClient
from src.config.settings import Config
from src.domain.ports.repositories import (
    DMChannelRepository,
    DMWrapperRepository,
    FriendRepository,
    UserRepository,
)
from src.fastapi_app import create_fastapi_app
from src.setup.ioc.container import UseCaseProvider

from fakes import (
    InMemoryDMChannelRepository,
    InMemoryDMWrapperRepository,
    InMemoryFriendRepository,
    InMemoryUserRepository,
    RecordingObservability,
    make_user,
)

SERVICE_AUTH_SECRET = "test-secret-with-at-least-32-bytes!!"
AUD = "teamchat-test-audience"
ISS = "teamchat-test-issuer"


def service_token(user_id="u1", secret=SERVICE_AUTH_SECRET, exp_offset=300, **extra):
    now = int(time.time())
    claims = {
        "sub": user_id,
        "iat": now,
        "exp": now + exp_offset,
        "iss": ISS,
        "aud": AUD,
    }
    claims.update(extra)
    return jwt.encode(claims, secret, algorithm="HS256")


# ==================== DOMAIN FIXTURES ====================


@pytest.fixture()
def alice():
    return make_user("u1", "alice", image="https://img.example.com/alice.png")


@pytest.fixture()
def bob():
    return make_user("u2", "bob", image="https://img.example.com/bob.png")


@pytest.fixture()
def carol():
    return make_user("u3", "carol")


@pytest.fixture()
def user_repository(alice, bob, carol):
    return InMemoryUserRepository([alice, bob, carol])


@pytest.fixture()
def dm_channel_repository():
    return InMemoryDMChannelRepository()


@pytest.fixture()
def dm_wrapper_repository():
    return InMemoryDMWrapperRepository()


@pytest.fixture()
def friend_repository():
    return InMemoryFriendRepository()


@pytest.fixture()
def observability():
    return RecordingObservability()


# ==================== APP FIXTURES ====================


class InMemoryRepositoryProvider(Provider):
    """Serves the fixtures' fakes in place of the Firestore repositories."""

    def __init__(self, users, channels, wrappers, friends):
        super().__init__()
        self._users = users
        self._channels = channels
        self._wrappers = wrappers
        self._friends = friends

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._users

    @provide(scope=Scope.APP)
    def get_dm_channel_repository(self) -> DMChannelRepository:
        return self._channels

    @provide(scope=Scope.APP)
    def get_dm_wrapper_repository(self) -> DMWrapperRepository:
        return self._wrappers

    @provide(scope=Scope.APP)
    def get_friend_repository(self) -> FriendRepository:
        return self._friends


@pytest.fixture()
def app(
    monkeypatch,
    user_repository,
    dm_channel_repository,
    dm_wrapper_repository,
    friend_repository,
):
    """Create a FastAPI app wired to in-memory repositories for each test."""
    monkeypatch.setattr(Config, "SERVICE_AUTH_SECRET", SERVICE_AUTH_SECRET)
    monkeypatch.setattr(Config, "SERVICE_AUTH_AUDIENCE", AUD)
    monkeypatch.setattr(Config, "SERVICE_AUTH_ISSUER", ISS)
    container = make_async_container(
        InMemoryRepositoryProvider(
            user_repository,
            dm_channel_repository,
            dm_wrapper_repository,
            friend_repository,
        ),
        UseCaseProvider(),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


def auth_headers_for(user_id: str) -> dict:
    return {"Authorization": f"Bearer {service_token(user_id)}"}


@pytest.fixture()
def auth_headers():
    """Authentication headers with a valid JWT for alice (u1)."""
    return auth_headers_for("u1")
