# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from nckuboard import create_app
from nckuboard.config import Config
from nckuboard.services.task_store import TaskStore


class BoardTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    SEED_DEMO_TASK = True
    SENTRY_DSN = ""
    LOG_LEVEL = "WARNING"
    LOG_JSON = False


@pytest.fixture()
def app(tmp_path: Path):
    """
    Fresh app per test: its own seeded TaskStore and a log dir under tmp_path,
    so nothing leaks between tests.
    """
    cfg = type("Cfg", (BoardTestConfig,), {"LOG_DIR": str(tmp_path / "logs")})
    return create_app(cfg)


@pytest.fixture()
def store(app) -> TaskStore:
    return app.extensions["task_store"]


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in_client(client):
    resp = client.post("/login", data={"email": "x@gs.ncku.edu.tw"})
    assert resp.status_code == 302
    return client
