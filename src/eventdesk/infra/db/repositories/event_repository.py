"""Repository for Event records. No business logic; caller owns the transaction."""
from __future__ import annotations
from collections.abc import Iterable
from datetime import datetime
from sqlalchemy import func
from sqlmodel import Session, col, select
from eventdesk.models.core import Event, EventStatus


class EventRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_title(self, owner_id: int, title: str) -> Event | None:
        return self._s.exec(
            select(Event).where(Event.created_by == owner_id, Event.title == title)
        ).first()

    def count_by_owner(self, owner_id: int) -> int:
        return self._s.exec(
            select(func.count()).select_from(Event).where(Event.created_by == owner_id)
        ).one()

    def count_by_status(self, owner_id: int, statuses: Iterable[EventStatus]) -> int:
        return self._s.exec(
            select(func.count()).select_from(Event).where(
                Event.created_by == owner_id, col(Event.status).in_(list(statuses))
            )
        ).one()

    def count_starting_between(self, owner_id: int, start: datetime, end: datetime) -> int:
        """Events with ``start < start_date <= end``."""
        return self._s.exec(
            select(func.count()).select_from(Event).where(
                Event.created_by == owner_id,
                Event.start_date > start,
                Event.start_date <= end,
            )
        ).one()

    def count_created_since(self, owner_id: int, since: datetime) -> int:
        return self._s.exec(
            select(func.count()).select_from(Event).where(
                Event.created_by == owner_id, Event.created_at >= since
            )
        ).one()

    def list_recent(self, owner_id: int, limit: int) -> list[Event]:
        """Newest-created first."""
        return list(self._s.exec(
            select(Event)
            .where(Event.created_by == owner_id)
            .order_by(col(Event.created_at).desc(), col(Event.id).desc())
            .limit(limit)
        ).all())

    def create(self, *, created_by: int, title: str, start_date: datetime, **fields) -> Event:
        event = Event(created_by=created_by, title=title, start_date=start_date, **fields)
        self._s.add(event)
        self._s.flush()
        return event
