"""EventDeskClient against a mocked transport."""
import json

import httpx
import pytest

from eventdesk.ui.api_client import APIError, EventDeskClient
from eventdesk.ui.validation import run_all_checks, validate_backend_connection


def _client(handler) -> EventDeskClient:
    return EventDeskClient(base_url="http://testserver", transport=httpx.MockTransport(handler))


def test_get_dashboard_stats_parses_payload(sample_stats_payload):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=sample_stats_payload)

    stats = _client(handler).get_dashboard_stats(42)
    assert seen == ["/users/42/dashboard/stats"]
    assert stats.total_events == 10
    assert stats.recent_activity.messages_sent == 30


def test_error_response_raises_api_error_with_detail():
    def handler(request):
        return httpx.Response(404, json={"detail": "User 9999 not found"})

    with pytest.raises(APIError) as exc_info:
        _client(handler).get_dashboard_stats(9999)
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "User 9999 not found"


def test_non_json_error_body_is_kept_as_text():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(APIError) as exc_info:
        _client(handler).health()
    assert exc_info.value.detail == "Bad Gateway"


def test_malformed_stats_are_not_rendered(sample_stats_payload):
    broken = dict(sample_stats_payload)
    broken["recentActivity"] = {"newRSVPs": 5, "messagessent": 30, "eventsCreated": 2}

    def handler(request):
        return httpx.Response(200, json=broken)

    with pytest.raises(APIError) as exc_info:
        _client(handler).get_dashboard_stats(42)
    assert exc_info.value.status_code == 502


def test_transport_failure_becomes_api_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(APIError) as exc_info:
        _client(handler).get_dashboard_stats(1)
    assert exc_info.value.status_code == 503


def test_invoke_tool_posts_inputs(sample_stats_payload):
    def handler(request):
        assert request.method == "POST"
        assert request.url.path == "/tools/dashboard_get_stats"
        assert json.loads(request.content) == {"userId": 42}
        return httpx.Response(200, json=sample_stats_payload)

    assert _client(handler).invoke_tool("dashboard_get_stats", {"userId": 42}) == sample_stats_payload


def test_backend_connection_check_reports_unreachable_backend():
    errors = validate_backend_connection("http://127.0.0.1:9")
    assert len(errors) == 1
    assert errors[0].startswith("Backend connection failed")


def test_run_all_checks_returns_list():
    assert isinstance(run_all_checks("http://127.0.0.1:9"), list)


def test_list_tools_parses_catalog():
    catalog = {
        "items": [{
            "id": "dashboard_get_stats",
            "name": "Get Dashboard Statistics",
            "description": "stats",
            "input_schema": {"type": "object"},
            "output_schema": {"type": "object"},
        }],
        "total": 1,
    }

    def handler(request):
        return httpx.Response(200, json=catalog)

    tools = _client(handler).list_tools()
    assert tools.total == 1
    assert tools.items[0].id == "dashboard_get_stats"


def test_snake_case_stats_are_rejected():
    snake = {
        "total_events": 1,
        "active_events": 1,
        "total_attendees": 1,
        "upcoming_events": 1,
        "recent_activity": {"new_rsvps": 1, "messages_sent": 1, "events_created": 1},
    }

    def handler(request):
        return httpx.Response(200, json=snake)

    with pytest.raises(APIError) as exc_info:
        _client(handler).get_dashboard_stats(1)
    assert exc_info.value.status_code == 502


def test_get_recent_events_sends_limit():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, request.url.params.get("limit")))
        return httpx.Response(200, json={"events": [{
            "id": 1,
            "title": "Workshop",
            "startDate": "2025-06-20T09:00:00Z",
            "status": "published",
            "attendeeCount": 0,
            "rsvpStats": {"attending": 0, "notAttending": 0, "maybe": 0, "pending": 0},
        }]})

    result = _client(handler).get_recent_events(7, limit=5)
    assert seen == [("/users/7/dashboard/recent-events", "5")]
    assert result.events[0].title == "Workshop"
