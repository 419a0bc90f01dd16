"""Dashboard use-case service: the database-backed statistics provider."""
from __future__ import annotations
import logging
from datetime import datetime, timedelta
from sqlalchemy.exc import SQLAlchemyError
from eventdesk.config import Settings, settings as default_settings
from eventdesk.domain.exceptions import NotFoundError, ProviderError
from eventdesk.infra.db.uow import UnitOfWork
from eventdesk.infra.db.repositories.user_repository import UserRepository
from eventdesk.infra.db.repositories.event_repository import EventRepository
from eventdesk.infra.db.repositories.attendee_repository import AttendeeRepository
from eventdesk.infra.db.repositories.message_repository import MessageRepository
from eventdesk.models.core import ACTIVE_STATUSES, EventStatus, RsvpStatus, as_utc, utcnow
from eventdesk.api.schemas.dashboard import (
    DashboardStats,
    RecentActivity,
    RecentEvent,
    RecentEventsResult,
    RsvpStats,
)

logger = logging.getLogger(__name__)


class DashboardService:
    """Counts a user's events, attendees and recent activity.

    ``now`` pins the clock for the windowed counts; by default each call
    reads the current UTC time. A naive ``now`` is read as UTC.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        *,
        now: datetime | None = None,
        settings: Settings = default_settings,
    ) -> None:
        self._uow = uow
        self._now = as_utc(now) if now is not None else None
        self._settings = settings

    def _require_user(self, user_id: int) -> None:
        if UserRepository(self._uow.session).get_by_id(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")

    def get_dashboard_stats(self, user_id: int) -> DashboardStats:
        session = self._uow.session
        now = self._now or utcnow()
        cfg = self._settings
        activity_since = now - timedelta(days=cfg.ACTIVITY_WINDOW_DAYS)

        events = EventRepository(session)
        attendees = AttendeeRepository(session)
        messages = MessageRepository(session)
        try:
            self._require_user(user_id)
            return DashboardStats(
                total_events=events.count_by_owner(user_id),
                active_events=events.count_by_status(user_id, ACTIVE_STATUSES),
                total_attendees=attendees.count_for_owner(user_id),
                upcoming_events=events.count_starting_between(
                    user_id, now, now + timedelta(days=cfg.UPCOMING_WINDOW_DAYS),
                ),
                recent_activity=RecentActivity(
                    new_rsvps=attendees.count_registered_since(
                        user_id, now - timedelta(days=cfg.RSVP_WINDOW_DAYS),
                    ),
                    messages_sent=messages.count_sent_since(user_id, activity_since),
                    events_created=events.count_created_since(user_id, activity_since),
                ),
            )
        except SQLAlchemyError as exc:
            logger.exception("Dashboard statistics query failed for user %s", user_id)
            raise ProviderError("Error calculating dashboard statistics") from exc

    def get_recent_events(self, user_id: int, limit: int = 10) -> RecentEventsResult:
        """The user's *limit* most recently created events with RSVP breakdowns."""
        session = self._uow.session
        try:
            self._require_user(user_id)
            recent = EventRepository(session).list_recent(user_id, limit)
            counts = AttendeeRepository(session).rsvp_counts([e.id for e in recent])
        except SQLAlchemyError as exc:
            logger.exception("Recent events query failed for user %s", user_id)
            raise ProviderError("Error loading recent events") from exc

        items = []
        for event in recent:
            by_status = counts.get(event.id, {})
            items.append(RecentEvent(
                id=event.id,
                title=event.title,
                start_date=event.start_date,
                status=EventStatus(event.status).value,
                attendee_count=sum(by_status.values()),
                rsvp_stats=RsvpStats(
                    attending=by_status.get(RsvpStatus.ATTENDING, 0),
                    not_attending=by_status.get(RsvpStatus.NOT_ATTENDING, 0),
                    maybe=by_status.get(RsvpStatus.MAYBE, 0),
                    pending=by_status.get(RsvpStatus.PENDING, 0),
                ),
            ))
        return RecentEventsResult(events=items)
