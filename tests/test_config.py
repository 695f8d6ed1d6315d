# tests/test_config.py

from __future__ import annotations

import pytest

from infrastructure.config import Settings


def test_defaults_when_env_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TASKS_DB_PATH", "TASKS_HOST", "TASKS_PORT", "TASKS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKS_DB_PATH", "/tmp/other.db")
    monkeypatch.setenv("TASKS_HOST", "0.0.0.0")
    monkeypatch.setenv("TASKS_PORT", "9000")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings == Settings(db_path="/tmp/other.db", host="0.0.0.0", port=9000, log_level="DEBUG")


def test_bad_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKS_PORT", "eighty")
    with pytest.raises(ValueError, match="TASKS_PORT"):
        Settings.from_env()
