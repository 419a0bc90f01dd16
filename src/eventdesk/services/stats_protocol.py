"""Collaborator interface for anything that can compute dashboard statistics."""
from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable

from eventdesk.api.schemas.dashboard import DashboardStats, RecentEventsResult


@runtime_checkable
class StatisticsProvider(Protocol):
    """Computes the dashboard numbers for one user.

    Implementations may be synchronous or return an awaitable, and may raise
    their own errors (e.g. ``NotFoundError`` for an unknown user); callers
    let those propagate.
    """

    def get_dashboard_stats(
        self, user_id: int,
    ) -> DashboardStats | Mapping[str, Any] | Awaitable[DashboardStats | Mapping[str, Any]]:
        ...


@runtime_checkable
class RecentEventsProvider(Protocol):
    """Lists a user's latest events for the dashboard table."""

    def get_recent_events(
        self, user_id: int, limit: int,
    ) -> RecentEventsResult | Mapping[str, Any] | Awaitable[RecentEventsResult | Mapping[str, Any]]:
        ...
