"""Shared test fixtures.

  use_test_engine  redirects UoW + infra layer to a temp-file SQLite DB.
  session          plain SQLModel session on the test engine, for seeding rows.
  client           FastAPI TestClient wired to the test engine.
"""
import pytest
from sqlmodel import SQLModel, create_engine, Session


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_eventdesk.db"
    test_engine = create_engine(f"sqlite:///{db_path}", echo=False)

    import eventdesk.models  # noqa: F401  register all ORM mappers
    import eventdesk.infra.db.uow  # noqa: F401  make sure the module exists before patching
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("eventdesk.db.engine", test_engine)
    monkeypatch.setattr("eventdesk.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("eventdesk.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session(use_test_engine):
    with Session(use_test_engine) as s:
        yield s


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from eventdesk.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_stats_payload():
    return {
        "totalEvents": 10,
        "activeEvents": 4,
        "totalAttendees": 120,
        "upcomingEvents": 3,
        "recentActivity": {"newRSVPs": 5, "messagesSent": 30, "eventsCreated": 2},
    }
