from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_directory.application.services.user_directory_service import UserDirectoryService
from user_directory.core.app_factory import create_application
from user_directory.core.config import Settings
from user_directory.infrastructure.persistence.sqlite import SQLitePersistence
from user_directory.services.password_hasher import PasswordHasher


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "data" / "users.db"))
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("USERS_DEFAULT_PAGE_SIZE", raising=False)
    monkeypatch.delenv("USERS_MAX_PAGE_SIZE", raising=False)
    return Settings()


@pytest.fixture
def persistence(settings):
    store = SQLitePersistence(settings.database_path)
    yield store
    store.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def service(persistence, hasher) -> UserDirectoryService:
    return UserDirectoryService(persistence, hasher)


@pytest.fixture
def client(settings):
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client
