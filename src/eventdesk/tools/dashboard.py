"""Dashboard tools."""
from __future__ import annotations

from eventdesk.api.schemas.dashboard import DashboardStats, DashboardStatsQuery
from eventdesk.services.stats_protocol import StatisticsProvider
from eventdesk.tools.registry import Tool

DASHBOARD_GET_STATS = "dashboard_get_stats"


def dashboard_tools(provider: StatisticsProvider) -> list[Tool]:
    """Build the dashboard tools bound to *provider*."""

    def get_stats(query: DashboardStatsQuery):
        return provider.get_dashboard_stats(query.user_id)

    return [
        Tool(
            id=DASHBOARD_GET_STATS,
            name="Get Dashboard Statistics",
            description=(
                "Get dashboard statistics and metrics for a user including events, "
                "attendees, and recent activity"
            ),
            input_model=DashboardStatsQuery,
            output_model=DashboardStats,
            fn=get_stats,
        ),
    ]
