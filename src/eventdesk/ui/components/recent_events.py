"""Recent events table for the dashboard page."""
from __future__ import annotations

from datetime import datetime

import streamlit as st

from eventdesk.api.schemas.dashboard import RecentEvent, RecentEventsResult


def format_event_date(value: datetime) -> str:
    return f"{value:%b} {value.day}, {value.year}"


def format_rsvps(event: RecentEvent) -> str:
    rsvp = event.rsvp_stats
    return f"{rsvp.attending} Yes · {rsvp.not_attending} No · {rsvp.maybe} Maybe"


def build_recent_event_rows(result: RecentEventsResult) -> list[dict[str, object]]:
    return [
        {
            "Event": e.title,
            "Date": format_event_date(e.start_date),
            "Status": e.status,
            "Attendees": e.attendee_count,
            "RSVPs": format_rsvps(e),
        }
        for e in result.events
    ]


def render_recent_events(result: RecentEventsResult) -> None:
    with st.container(border=True):
        st.subheader("Recent Events")
        st.caption("Your latest events and their RSVP status")
        rows = build_recent_event_rows(result)
        if not rows:
            st.info("No events found")
        else:
            st.table(rows)
