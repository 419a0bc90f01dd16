"""Dashboard DTOs: pure Pydantic, zero ORM imports.

Field names are camelCase on the wire and snake_case in Python.
"""
from __future__ import annotations
from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator
from pydantic.alias_generators import to_camel

Count = Annotated[StrictInt, Field(ge=0)]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        revalidate_instances="always",
    )


class RecentActivity(_WireModel):
    new_rsvps: Count = Field(alias="newRSVPs")
    messages_sent: Count
    events_created: Count


class DashboardStats(_WireModel):
    total_events: Count
    active_events: Count
    total_attendees: Count
    upcoming_events: Count
    recent_activity: RecentActivity

    @model_validator(mode="after")
    def active_within_total(self) -> "DashboardStats":
        if self.active_events > self.total_events:
            raise ValueError("activeEvents must not exceed totalEvents")
        return self


class DashboardStatsQuery(_WireModel):
    user_id: StrictInt


class RecentEventsQuery(_WireModel):
    user_id: StrictInt
    limit: StrictInt = Field(default=10, ge=1, le=50)


class RsvpStats(_WireModel):
    attending: Count
    not_attending: Count
    maybe: Count
    pending: Count


class RecentEvent(_WireModel):
    id: StrictInt
    title: str
    start_date: datetime
    status: str
    attendee_count: Count
    rsvp_stats: RsvpStats


class RecentEventsResult(_WireModel):
    """Latest events first, each with its attendee and RSVP counts."""

    events: list[RecentEvent]
