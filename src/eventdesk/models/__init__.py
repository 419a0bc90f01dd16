"""ORM tables. Importing this package registers every mapper with SQLModel."""
from eventdesk.models.core import (  # noqa: F401
    Attendee,
    Event,
    EventStatus,
    LocationType,
    Message,
    RsvpStatus,
    User,
    UserRole,
    Visibility,
    utcnow,
)
