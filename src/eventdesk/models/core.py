"""Users, events, attendees and messages."""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp; datetime columns only accept aware values."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Read a naive datetime as UTC; convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class EventStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ACTIVE = "active"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


ACTIVE_STATUSES = (EventStatus.PUBLISHED, EventStatus.ACTIVE)


class LocationType(str, Enum):
    PHYSICAL = "physical"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class RsvpStatus(str, Enum):
    ATTENDING = "attending"
    NOT_ATTENDING = "not_attending"
    MAYBE = "maybe"
    PENDING = "pending"


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True)
    name: str
    role: UserRole = Field(default=UserRole.USER)
    created_at: datetime = Field(default_factory=utcnow)


class Event(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str = ""
    start_date: datetime = Field(index=True)
    end_date: Optional[datetime] = None
    location_type: LocationType = Field(default=LocationType.PHYSICAL)
    capacity: Optional[int] = None
    status: EventStatus = Field(default=EventStatus.DRAFT, index=True)
    visibility: Visibility = Field(default=Visibility.PRIVATE)
    created_by: int = Field(foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)


class Attendee(SQLModel, table=True):
    __table_args__ = (UniqueConstraint("event_id", "email"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="event.id", index=True)
    name: str
    email: str
    rsvp_status: RsvpStatus = Field(default=RsvpStatus.PENDING)
    registration_date: datetime = Field(default_factory=utcnow, index=True)


class Message(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    event_id: int = Field(foreign_key="event.id", index=True)
    created_by: int = Field(foreign_key="user.id", index=True)
    subject: str
    body: str = ""
    sent_date: Optional[datetime] = None  # NULL while still a draft
    created_at: datetime = Field(default_factory=utcnow)
