# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from task_service.main import create_app
from task_service.store import TaskStore


@pytest.fixture()
def store() -> TaskStore:
    """A fresh, empty store per test."""
    return TaskStore()


@pytest.fixture()
def client(store: TaskStore) -> TestClient:
    """API client bound to the per-test store."""
    return TestClient(create_app(store))
