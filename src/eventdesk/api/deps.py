"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from eventdesk.infra.db.uow import UnitOfWork
from eventdesk.services.dashboard_service import DashboardService
from eventdesk.services.stats_protocol import RecentEventsProvider, StatisticsProvider
from eventdesk.tools.catalog import build_registry
from eventdesk.tools.registry import ToolRegistry


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


def get_dashboard_service(uow: UnitOfWork = Depends(get_uow)) -> DashboardService:
    return DashboardService(uow)


def get_stats_provider(
    service: DashboardService = Depends(get_dashboard_service),
) -> StatisticsProvider:
    return service


def get_events_provider(
    service: DashboardService = Depends(get_dashboard_service),
) -> RecentEventsProvider:
    return service


def get_tool_registry(
    stats: StatisticsProvider = Depends(get_stats_provider),
    events: RecentEventsProvider = Depends(get_events_provider),
) -> ToolRegistry:
    """Registry bound to this request's collaborators; override in tests."""
    return build_registry(stats, events)
