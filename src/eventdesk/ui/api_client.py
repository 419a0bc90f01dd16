"""Typed HTTP client for Streamlit pages.

Only imports from ``eventdesk.api.schemas``; never ORM, never DB.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

from typing import Any

import httpx
import pydantic
import streamlit as st

from eventdesk.api.schemas.dashboard import DashboardStats, RecentEventsResult
from eventdesk.api.schemas.tools import ToolList
from eventdesk.config import settings


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class EventDeskClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url or settings.API_BASE_URL, timeout=30.0, transport=transport,
        )

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if resp.is_success:
            return
        try:
            detail = resp.json().get("detail", resp.text)
        except (ValueError, AttributeError):
            detail = resp.text
        raise APIError(resp.status_code, str(detail))

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise APIError(503, f"Backend unreachable: {exc}") from exc
        self._raise_for_status(resp)
        return resp

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def get_dashboard_stats(self, user_id: int) -> DashboardStats:
        resp = self._send("GET", f"/users/{user_id}/dashboard/stats")
        try:
            return DashboardStats.model_validate(resp.json(), by_alias=True, by_name=False)
        except pydantic.ValidationError as exc:
            raise APIError(502, f"Malformed dashboard statistics: {exc.error_count()} error(s)") from exc

    def get_recent_events(self, user_id: int, limit: int = 10) -> RecentEventsResult:
        resp = self._send("GET", f"/users/{user_id}/dashboard/recent-events", params={"limit": limit})
        try:
            return RecentEventsResult.model_validate(resp.json(), by_alias=True, by_name=False)
        except pydantic.ValidationError as exc:
            raise APIError(502, f"Malformed recent events: {exc.error_count()} error(s)") from exc

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def list_tools(self) -> ToolList:
        resp = self._send("GET", "/tools")
        return ToolList.model_validate(resp.json())

    def invoke_tool(self, tool_id: str, inputs: dict[str, Any]) -> dict[str, Any]:
        resp = self._send("POST", f"/tools/{tool_id}", json=inputs)
        return resp.json()

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        resp = self._send("GET", "/health")
        return resp.json()


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> EventDeskClient:
    """Return a cached ``EventDeskClient`` for the current Streamlit session."""
    if "eventdesk_api_client" not in st.session_state:
        base_url = st.session_state.get("eventdesk_api_url", settings.API_BASE_URL)
        st.session_state["eventdesk_api_client"] = EventDeskClient(base_url=base_url)
    return st.session_state["eventdesk_api_client"]
