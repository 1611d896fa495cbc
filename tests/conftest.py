"""Shared fixtures for the user directory tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from userdir import AppConfig, configure_fastapi_app
from userdir.common import Role, User
from userdir.store import UserStore

SEED_USERS = [
    ("Grace Hopper", "grace@example.com", [Role.ADMIN]),
    ("Alan Turing", "alan@example.com", [Role.MODIFIER]),
    ("Ada Lovelace", "ada@example.com", [Role.WATCHER]),
    ("Edsger Dijkstra", "edsger@example.com", [Role.MODIFIER]),
    ("Barbara Liskov", "barbara@example.com", [Role.WATCHER]),
    ("Donald Knuth", "donald@example", [Role.ADMIN]),
]


@pytest.fixture
def app_config() -> AppConfig:
    """Create a test application configuration."""
    return AppConfig(
        server_port=8080,
        server_host="127.0.0.1",
        logging_level="DEBUG",
        root_path="",
    )


@pytest.fixture
def store() -> UserStore:
    """Create an empty user store."""
    return UserStore()


@pytest.fixture
def seeded_store(store: UserStore) -> UserStore:
    """Create a store holding the seed users with ids 1 to 6."""
    for name, email, roles in SEED_USERS:
        store.create(User(name, email, list(roles)))
    return store


@pytest.fixture
def app(app_config: AppConfig, store: UserStore) -> FastAPI:
    """Create the application backed by the ``store`` fixture."""
    return configure_fastapi_app(app_config, store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for the application."""
    return TestClient(app)


@pytest.fixture
def seeded_client(seeded_store: UserStore, app: FastAPI) -> TestClient:
    """Create a test client whose store holds the seed users."""
    assert app.state.store is seeded_store
    return TestClient(app)
