"""
Pytest configuration và shared fixtures
"""
import itertools
import pytest
from typing import Generator
from fastapi.testclient import TestClient

from todo_app.main import app
from todo_app.api.dependencies import get_app_state
from todo_app.core.state import AppState
from todo_app.core.domain.identity import Identity
from todo_app.core.services.auth_service import AuthService
from todo_app.core.services.task_service import TaskService


class FakeClock:
    """Deterministic nanosecond clock: 1000, 2000, 3000, ..."""

    def __init__(self, start: int = 1000, step: int = 1000):
        self._ticks = itertools.count(start, step)
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return next(self._ticks)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app_state(clock) -> AppState:
    """Fresh, empty AppState per test"""
    return AppState.create(clock=clock)


@pytest.fixture
def auth_service(app_state) -> AuthService:
    return AuthService(app_state)


@pytest.fixture
def task_service(app_state, auth_service) -> TaskService:
    return TaskService(app_state, auth_service)


@pytest.fixture
def alice() -> Identity:
    return Identity("aaaaa-aa")


@pytest.fixture
def bob() -> Identity:
    return Identity("bbbbb-bb")


@pytest.fixture
def client(app_state) -> Generator[TestClient, None, None]:
    """FastAPI test client bound to a fresh AppState"""
    app.dependency_overrides[get_app_state] = lambda: app_state
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
