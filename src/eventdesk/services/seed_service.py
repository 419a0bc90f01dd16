"""Demo data for local development (``eventdesk db seed``)."""
from __future__ import annotations
from datetime import datetime, timedelta
from pydantic import BaseModel
from eventdesk.infra.db.uow import UnitOfWork
from eventdesk.infra.db.repositories.user_repository import UserRepository
from eventdesk.infra.db.repositories.event_repository import EventRepository
from eventdesk.infra.db.repositories.attendee_repository import AttendeeRepository
from eventdesk.infra.db.repositories.message_repository import MessageRepository
from eventdesk.models.core import (
    EventStatus, LocationType, RsvpStatus, UserRole, Visibility, as_utc, utcnow,
)


class SeedSummary(BaseModel):
    users: int = 0
    events: int = 0
    attendees: int = 0
    messages: int = 0


_USERS = [
    ("admin@example.com", "Admin", UserRole.ADMIN),
    ("user@example.com", "John Doe", UserRole.USER),
]

# (owner email, title, days from now, location, capacity, status)
_EVENTS = [
    ("admin@example.com", "Annual Company Conference", 21, LocationType.PHYSICAL, 200, EventStatus.PUBLISHED),
    ("admin@example.com", "Quarterly Town Hall", 75, LocationType.HYBRID, 500, EventStatus.DRAFT),
    ("user@example.com", "Virtual Team Building Workshop", 10, LocationType.VIRTUAL, 50, EventStatus.PUBLISHED),
    ("user@example.com", "Product Launch Retrospective", -14, LocationType.PHYSICAL, 30, EventStatus.COMPLETED),
]

# (event title, name, email, rsvp status, registered days ago)
_ATTENDEES = [
    ("Annual Company Conference", "Jane Smith", "attendee1@example.com", RsvpStatus.ATTENDING, 2),
    ("Annual Company Conference", "Bob Johnson", "attendee2@example.com", RsvpStatus.MAYBE, 12),
    ("Virtual Team Building Workshop", "Alice Brown", "attendee3@example.com", RsvpStatus.ATTENDING, 1),
    ("Virtual Team Building Workshop", "Carlos Diaz", "attendee4@example.com", RsvpStatus.PENDING, 40),
]

# (event title, subject, sent days ago or None for a draft)
_MESSAGES = [
    ("Annual Company Conference", "Conference agenda", 3),
    ("Annual Company Conference", "Parking instructions", None),
    ("Virtual Team Building Workshop", "Your joining link", 5),
]


class SeedService:
    def __init__(self, uow: UnitOfWork, *, now: datetime | None = None) -> None:
        self._uow = uow
        self._now = now

    def seed_demo(self) -> SeedSummary:
        """Insert the demo rows that are not present yet. Safe to re-run."""
        s = self._uow.session
        now = as_utc(self._now) if self._now else utcnow()
        users, events = UserRepository(s), EventRepository(s)
        attendees, messages = AttendeeRepository(s), MessageRepository(s)
        summary = SeedSummary()

        owners: dict[str, int] = {}
        for email, name, role in _USERS:
            user = users.get_by_email(email)
            if user is None:
                user = users.create(email=email, name=name, role=role)
                summary.users += 1
            owners[email] = user.id

        by_title: dict[str, tuple[int, int]] = {}
        created_titles: set[str] = set()
        for owner, title, days, location, capacity, status in _EVENTS:
            owner_id = owners[owner]
            event = events.get_by_title(owner_id, title)
            if event is None:
                start = now + timedelta(days=days)
                event = events.create(
                    created_by=owner_id,
                    title=title,
                    start_date=start,
                    end_date=start + timedelta(hours=8),
                    location_type=location,
                    capacity=capacity,
                    status=status,
                    visibility=Visibility.PUBLIC,
                )
                summary.events += 1
                created_titles.add(title)
            by_title[title] = (event.id, owner_id)

        for title, name, email, rsvp, days_ago in _ATTENDEES:
            event_id, _ = by_title[title]
            if attendees.get_by_email(event_id, email) is None:
                attendees.create(
                    event_id=event_id,
                    name=name,
                    email=email,
                    rsvp_status=rsvp,
                    registration_date=now - timedelta(days=days_ago),
                )
                summary.attendees += 1

        # Messages have no natural key; only attach them to events created above.
        for title, subject, sent_days_ago in _MESSAGES:
            if title not in created_titles:
                continue
            event_id, owner_id = by_title[title]
            messages.create(
                event_id=event_id,
                created_by=owner_id,
                subject=subject,
                sent_date=None if sent_days_ago is None else now - timedelta(days=sent_days_ago),
            )
            summary.messages += 1

        self._uow.commit()
        return summary
