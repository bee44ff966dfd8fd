"""Shared fixtures: a throwaway SQLite database and a recording broadcaster."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "rentdesk_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from rentdesk.config import get_settings  # noqa: E402

get_settings.cache_clear()

from rentdesk.application.use_cases.users import create_user  # noqa: E402
from rentdesk.domain.entities import Role, User  # noqa: E402
from rentdesk.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from rentdesk.infrastructure.security import create_access_token  # noqa: E402
from rentdesk.interfaces.api.dependencies import (  # noqa: E402
    get_broadcaster,
    password_signature,
)


@dataclass
class BroadcastCall:
    rooms: list[str]
    event: str
    payload: Any


class RecordingBroadcaster:
    """Broadcaster double that keeps every call instead of sending it."""

    def __init__(self) -> None:
        self.calls: list[BroadcastCall] = []

    def broadcast(self, rooms: Iterable[Role | str], *, event: str, payload: Any) -> None:
        names = [room.value if isinstance(room, Role) else str(room) for room in rooms]
        self.calls.append(BroadcastCall(rooms=names, event=event, payload=payload))

    def events(self, event: str) -> list[BroadcastCall]:
        return [call for call in self.calls if call.event == event]


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


def _make_user(session, *, email: str, first_name: str, role: Role) -> User:
    return create_user(
        session,
        email=email,
        password="StrongPass123",
        first_name=first_name,
        last_name="Tester",
        role=role,
    )


@pytest.fixture()
def admin(session) -> User:
    return _make_user(session, email="owner@example.com", first_name="Olga", role=Role.ADMIN)


@pytest.fixture()
def employee(session) -> User:
    return _make_user(session, email="staff@example.com", first_name="Ana", role=Role.EMPLOYEE)


@pytest.fixture()
def customer(session) -> User:
    return _make_user(session, email="renter@example.com", first_name="Rui", role=Role.CUSTOMER)


def _auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(
        data={
            "sub": user.email,
            "role": user.role.value,
            "pwd_sig": password_signature(user),
        }
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers():
    """Return a helper building bearer headers for a stored user."""

    return _auth_headers


@pytest.fixture()
def client(broadcaster):
    """Return a test client whose realtime fan-out is recorded."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    app.dependency_overrides[get_broadcaster] = lambda: broadcaster
    with TestClient(app) as test_client:
        yield test_client
