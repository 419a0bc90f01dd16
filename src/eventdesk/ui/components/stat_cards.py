"""Summary card grid for the dashboard page.

``build_stat_cards`` decides what the four cards say and is a pure function
of its input; ``render_stat_cards`` only lays them out.
"""
from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from eventdesk.api.schemas.dashboard import DashboardStats


@dataclass(frozen=True)
class StatCard:
    title: str
    value: int
    caption: str
    icon: str


def build_stat_cards(stats: DashboardStats) -> list[StatCard]:
    activity = stats.recent_activity
    return [
        StatCard(
            title="Total Events",
            value=stats.total_events,
            caption=f"{stats.active_events} active events",
            icon=":material/calendar_month:",
        ),
        StatCard(
            title="Total Attendees",
            value=stats.total_attendees,
            caption=f"+{activity.new_rsvps} new RSVPs this week",
            icon=":material/group:",
        ),
        StatCard(
            title="Upcoming Events",
            value=stats.upcoming_events,
            caption="In the next 30 days",
            icon=":material/schedule:",
        ),
        StatCard(
            title="Messages Sent",
            value=activity.messages_sent,
            caption="This month",
            icon=":material/trending_up:",
        ),
    ]


def render_stat_cards(stats: DashboardStats) -> None:
    cards = build_stat_cards(stats)
    for col, card in zip(st.columns(len(cards)), cards):
        with col.container(border=True):
            st.markdown(f"{card.icon} **{card.title}**")
            st.metric(card.title, card.value, label_visibility="collapsed")
            st.caption(card.caption)
