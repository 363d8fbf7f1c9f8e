"""
Fixtures for API tests.

The app runs against a container wired with the real use cases over
in-memory repositories, so requests exercise routing, auth and error
rendering end to end without MongoDB.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from devconnect.di.base_container import BaseContainer
from devconnect.di.providers import AuthProvider, PostProvider, ProfileProvider
from devconnect.domain.repositories import (
    PostRepository,
    ProfileRepository,
    TransactionRunner,
    UserRepository,
)

_CONTROLLER_MODULES = (
    "devconnect.api.v1.dependencies",
    "devconnect.api.v1.auth_controller",
    "devconnect.api.v1.profile_controller",
    "devconnect.api.v1.post_controller",
)


@pytest.fixture
def container(user_repo, profile_repo, post_repo, transaction_runner):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(ProfileRepository, profile_repo)
    container.register_singleton(PostRepository, post_repo)
    container.register_singleton(TransactionRunner, transaction_runner)
    AuthProvider.register(container)
    ProfileProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Create test client with the in-memory container."""
    from contextlib import ExitStack
    from devconnect.main import app

    with ExitStack() as stack:
        for module in _CONTROLLER_MODULES:
            stack.enter_context(patch(f"{module}.get_container", return_value=container))
        stack.enter_context(patch("devconnect.main.ensure_indexes", new=AsyncMock()))
        stack.enter_context(patch("devconnect.main.close_client"))
        with TestClient(app) as c:
            yield c


def register(client: TestClient, name: str):
    """Register a user and return ``(auth headers, user id)``."""
    response = client.post(
        "/api/v1/auth/register",
        json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "password": "password123",
        },
    )
    assert response.status_code == 201, response.text
    headers = {"Authorization": f"Bearer {response.json()['access_token']}"}
    user_id = client.get("/api/v1/auth/me", headers=headers).json()["id"]
    return headers, user_id


@pytest.fixture
def alice(client):
    return register(client, "Alice")


@pytest.fixture
def bob(client):
    return register(client, "Bob")
