"""Assemble the full tool registry for a given set of collaborators."""
from __future__ import annotations

from eventdesk.services.stats_protocol import RecentEventsProvider, StatisticsProvider
from eventdesk.tools.dashboard import dashboard_tools
from eventdesk.tools.events import event_tools
from eventdesk.tools.registry import ToolRegistry


def build_registry(
    stats_provider: StatisticsProvider,
    events_provider: RecentEventsProvider | None = None,
) -> ToolRegistry:
    """Register every tool; *events_provider* defaults to *stats_provider*."""
    if events_provider is None:
        events_provider = stats_provider
    registry = ToolRegistry()
    for tool in dashboard_tools(stats_provider) + event_tools(events_provider):
        registry.register(tool)
    return registry
