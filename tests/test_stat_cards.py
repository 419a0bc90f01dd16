"""Presentation logic for the dashboard card grid."""
import pytest

from eventdesk.api.schemas.dashboard import DashboardStats
from eventdesk.ui.components.stat_cards import StatCard, build_stat_cards


@pytest.fixture
def stats(sample_stats_payload):
    return DashboardStats.model_validate(sample_stats_payload)


def test_builds_four_cards_in_fixed_order(stats):
    cards = build_stat_cards(stats)
    assert [c.title for c in cards] == [
        "Total Events", "Total Attendees", "Upcoming Events", "Messages Sent",
    ]


def test_scenario_user_42_values(stats):
    events, attendees, upcoming, messages = build_stat_cards(stats)

    assert str(events.value) == "10"
    assert events.caption == "4 active events"
    assert str(attendees.value) == "120"
    assert attendees.caption == "+5 new RSVPs this week"
    assert str(upcoming.value) == "3"
    assert upcoming.caption == "In the next 30 days"
    assert str(messages.value) == "30"
    assert messages.caption == "This month"


def test_messages_card_reads_camel_cased_messages_sent(sample_stats_payload):
    payload = dict(sample_stats_payload)
    payload["recentActivity"] = dict(payload["recentActivity"], messagesSent=7)
    cards = build_stat_cards(DashboardStats.model_validate(payload))
    assert cards[3].value == 7


def test_same_input_gives_identical_output(stats):
    first = build_stat_cards(stats)
    second = build_stat_cards(stats)
    assert first == second
    assert build_stat_cards(stats.model_copy()) == first


def test_cards_are_immutable(stats):
    card = build_stat_cards(stats)[0]
    assert isinstance(card, StatCard)
    with pytest.raises(AttributeError):
        card.value = 0
