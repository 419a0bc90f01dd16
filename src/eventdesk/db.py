"""Process-wide SQLModel engine."""
from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from eventdesk.config import settings


def _make_engine() -> Engine:
    url = settings.DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine()


def ensure_sqlite_dir(bind: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    database = bind.url.database
    if bind.dialect.name == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables."""
    import eventdesk.models  # noqa: F401  registers ORM mappers
    bind = bind or engine
    ensure_sqlite_dir(bind)
    SQLModel.metadata.create_all(bind)
