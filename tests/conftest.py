# tests/conftest.py
import uuid

import pytest
from fastapi.testclient import TestClient

from users_api.adapters.persistence.in_memory_store import InMemoryUserStore
from users_api.core.domain.models import UserEntity
from users_api.main import create_app
from users_api.shared.container import container as app_container


@pytest.fixture(scope="function")
def store():
    """A fresh, empty in-memory store per test."""
    return InMemoryUserStore()


@pytest.fixture(scope="function")
def container(store):
    """
    The application container with its store overridden by the per-test store.
    Overrides are removed after the test.
    """
    app_container.user_store.override(store)
    yield app_container
    app_container.user_store.reset_override()


@pytest.fixture
def client(container):
    """A TestClient for a freshly built app wired to the per-test store."""
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def existing_user(store):
    """A stored user with game stats that a full replace would reset."""
    user = UserEntity(
        id=uuid.UUID("77777777-7777-7777-7777-777777777777"),
        login="johndoe",
        first_name="John",
        last_name="Doe",
        games_played=5,
        current_game_id=uuid.UUID("99999999-9999-9999-9999-999999999999"),
    )
    store.update_or_insert(user)
    return user


@pytest.fixture
def seeded_store(store):
    """A store holding 25 users, inserted in login order user00..user24."""
    for i in range(25):
        store.insert(UserEntity(login=f"user{i:02d}", first_name=f"First{i}", last_name=f"Last{i}"))
    return store
