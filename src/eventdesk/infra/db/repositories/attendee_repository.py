"""Repository for Attendee records. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import datetime
from sqlalchemy import func
from sqlmodel import Session, col, select
from eventdesk.models.core import Attendee, Event, RsvpStatus


class AttendeeRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_email(self, event_id: int, email: str) -> Attendee | None:
        return self._s.exec(
            select(Attendee).where(Attendee.event_id == event_id, Attendee.email == email)
        ).first()

    def count_for_owner(self, owner_id: int) -> int:
        """Attendees across every event created by *owner_id*."""
        return self._s.exec(
            select(func.count()).select_from(Attendee)
            .join(Event, Attendee.event_id == Event.id)
            .where(Event.created_by == owner_id)
        ).one()

    def count_registered_since(self, owner_id: int, since: datetime) -> int:
        return self._s.exec(
            select(func.count()).select_from(Attendee)
            .join(Event, Attendee.event_id == Event.id)
            .where(Event.created_by == owner_id, Attendee.registration_date >= since)
        ).one()

    def rsvp_counts(self, event_ids: list[int]) -> dict[int, dict[RsvpStatus, int]]:
        """Attendee counts per event and RSVP status."""
        if not event_ids:
            return {}
        rows = self._s.exec(
            select(Attendee.event_id, Attendee.rsvp_status, func.count())
            .where(col(Attendee.event_id).in_(event_ids))
            .group_by(Attendee.event_id, Attendee.rsvp_status)
        ).all()
        counts: dict[int, dict[RsvpStatus, int]] = {}
        for event_id, status, n in rows:
            counts.setdefault(event_id, {})[RsvpStatus(status)] = n
        return counts

    def create(
        self,
        *,
        event_id: int,
        name: str,
        email: str,
        rsvp_status: RsvpStatus = RsvpStatus.PENDING,
        registration_date: datetime | None = None,
    ) -> Attendee:
        attendee = Attendee(event_id=event_id, name=name, email=email, rsvp_status=rsvp_status)
        if registration_date is not None:
            attendee.registration_date = registration_date
        self._s.add(attendee)
        self._s.flush()
        return attendee
