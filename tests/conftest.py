# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from domain.entities import Task
from infrastructure.config import Settings
from infrastructure.database import Database
from main import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(db_path=str(tmp_path / "tasks.sqlite3"))


@pytest.fixture()
def db(settings: Settings) -> Database:
    return Database(settings.db_path)


@pytest.fixture()
def use_cases(db: Database) -> TaskUseCases:
    return TaskUseCases(db)


@pytest.fixture()
def mock_db() -> MagicMock:
    """Store double; tests assert on it to prove a request never reached the store."""
    return MagicMock(spec=Database)


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture()
def make_task():
    def _make(title: str = "A", due: date = date(2024, 3, 1), **kw) -> Task:
        return Task(title=title, due_date=due, description=kw.get("description", ""), tags=kw.get("tags", "x"))
    return _make
