from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todo_app.core.config import Settings
from todo_app.domain.repositories import TodoRepository
from todo_app.main import create_app


@pytest.fixture()
def repo() -> TodoRepository:
    return TodoRepository()


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(ENV="test")


@pytest.fixture()
def client(repo: TodoRepository, test_settings: Settings) -> TestClient:
    app = create_app(settings=test_settings, repository=repo)
    return TestClient(app, follow_redirects=False)
