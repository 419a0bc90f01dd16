"""Event tools."""
from __future__ import annotations

from eventdesk.api.schemas.dashboard import RecentEventsQuery, RecentEventsResult
from eventdesk.services.stats_protocol import RecentEventsProvider
from eventdesk.tools.registry import Tool

EVENT_GET_RECENT = "event_get_recent"


def event_tools(provider: RecentEventsProvider) -> list[Tool]:
    def get_recent(query: RecentEventsQuery):
        return provider.get_recent_events(query.user_id, query.limit)

    return [
        Tool(
            id=EVENT_GET_RECENT,
            name="Get Recent Events",
            description="Get recent events for dashboard display",
            input_model=RecentEventsQuery,
            output_model=RecentEventsResult,
            fn=get_recent,
        ),
    ]
