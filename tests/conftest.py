# tests/conftest.py
from __future__ import annotations

import datetime
import os
from collections.abc import Generator, Iterator
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")

from roomgate.api.v1.dependencies import get_actuation_dispatcher_dep, get_evaluation_date
from roomgate.core.security import create_access_token
from roomgate.db.session import Base
from roomgate.db.session import get_db as app_get_session
from roomgate.main import app as fastapi_app
from roomgate.models import Guest, Reservation, Room, Staff
from roomgate.services.actuation import ActuationDispatcher

TEST_DB_URL = "sqlite://"

# Fixed evaluation date so reservation windows do not depend on the wall clock.
TODAY = datetime.date(2026, 3, 14)
ARRIVED_AT = datetime.datetime(2026, 3, 13, 15, 0, tzinfo=datetime.UTC)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def door_channel() -> MagicMock:
    """Stand-in for the Redis client; every publish reaches one controller."""
    channel = MagicMock()
    channel.publish.return_value = 1
    return channel


@pytest.fixture(autouse=True)
def override_request_context(app: FastAPI, door_channel: MagicMock) -> Iterator[None]:
    """Pin the evaluation date and route door commands to ``door_channel``."""
    app.dependency_overrides[get_evaluation_date] = lambda: TODAY
    app.dependency_overrides[get_actuation_dispatcher_dep] = lambda: ActuationDispatcher(door_channel)
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_evaluation_date, None)
        app.dependency_overrides.pop(get_actuation_dispatcher_dep, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def staff(db_session: Session) -> Staff:
    """Staff member without a national ID on file."""
    member = Staff(id="s1", email="desk@roomgate.io", password="hashed", firstname="Front", lastname="Desk")
    db_session.add(member)
    db_session.flush()
    return member


@pytest.fixture()
def rooms(db_session: Session) -> list[Room]:
    created = [Room(id=room_id, type="standard") for room_id in (1, 2, 3, 4)]
    db_session.add_all(created)
    db_session.flush()
    return created


@pytest.fixture()
def owner(db_session: Session) -> Guest:
    guest = Guest(id="g-owner", email="owner@roomgate.io", firstname="Olive", lastname="Owner")
    db_session.add(guest)
    db_session.flush()
    return guest


@pytest.fixture()
def friend(db_session: Session) -> Guest:
    guest = Guest(id="g-friend", email="friend@roomgate.io", firstname="Fern", lastname="Friend")
    db_session.add(guest)
    db_session.flush()
    return guest


@pytest.fixture()
def stranger(db_session: Session) -> Guest:
    """Guest with no reservation and no grants."""
    guest = Guest(id="g-stranger", email="stranger@roomgate.io")
    db_session.add(guest)
    db_session.flush()
    return guest


@pytest.fixture()
def reservation(db_session: Session, owner: Guest, rooms: list[Room]) -> Reservation:
    """Owner's occupied reservation on rooms 1-3, covering ``TODAY``."""
    booking = Reservation(
        id="r1",
        guest_id=owner.id,
        check_in=TODAY - datetime.timedelta(days=1),
        check_out=TODAY + datetime.timedelta(days=2),
        check_in_enter_time=ARRIVED_AT,
        rooms=rooms[:3],
    )
    db_session.add(booking)
    db_session.flush()
    return booking


def bearer(subject: str, role: str) -> dict[str, str]:
    token = create_access_token(subject, role)  # type: ignore[arg-type]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def owner_headers(owner: Guest) -> dict[str, str]:
    return bearer(owner.id, "guest")


@pytest.fixture()
def friend_headers(friend: Guest) -> dict[str, str]:
    return bearer(friend.id, "guest")


@pytest.fixture()
def stranger_headers(stranger: Guest) -> dict[str, str]:
    return bearer(stranger.id, "guest")


@pytest.fixture()
def staff_headers(staff: Staff) -> dict[str, str]:
    return bearer(staff.id, "staff")
