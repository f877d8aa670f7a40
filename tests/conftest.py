"""Shared fixtures for Tourism Manager tests."""

import pytest

from tourism.accounts import AccountStore
from tourism.orchestrator import TourismService
from tourism.services.storage import InMemoryAccountStorage


@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return InMemoryAccountStorage()


@pytest.fixture
def store(storage):
    """Account store backed by in-memory storage."""
    return AccountStore(storage)


@pytest.fixture
def service(store):
    """Anonymous service over the in-memory store."""
    return TourismService(store)


@pytest.fixture
def users_file(tmp_path):
    """Path for a flat accounts file that does not exist yet."""
    return tmp_path / "users.txt"
