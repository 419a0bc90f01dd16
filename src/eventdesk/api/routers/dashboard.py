"""Dashboard endpoints."""
from fastapi import APIRouter, Depends
from eventdesk.api.deps import get_tool_registry
from eventdesk.api.schemas.dashboard import DashboardStats, RecentEventsResult
from eventdesk.tools.dashboard import DASHBOARD_GET_STATS
from eventdesk.tools.events import EVENT_GET_RECENT
from eventdesk.tools.registry import ToolRegistry

router = APIRouter(prefix="/users/{user_id}/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_stats(user_id: int, registry: ToolRegistry = Depends(get_tool_registry)) -> DashboardStats:
    return registry.get(DASHBOARD_GET_STATS).invoke({"userId": user_id})


@router.get("/recent-events", response_model=RecentEventsResult)
def get_recent_events(
    user_id: int,
    limit: int = 10,
    registry: ToolRegistry = Depends(get_tool_registry),
) -> RecentEventsResult:
    return registry.get(EVENT_GET_RECENT).invoke({"userId": user_id, "limit": limit})
