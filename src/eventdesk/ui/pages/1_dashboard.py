import streamlit as st
from eventdesk.ui.api_client import get_client, APIError
from eventdesk.ui.components.recent_events import render_recent_events
from eventdesk.ui.components.stat_cards import render_stat_cards
from eventdesk.ui.state import get_user_id

st.title("Dashboard")
st.caption("Welcome back! Here's what's happening with your events.")

user_id = get_user_id()
if not user_id:
    st.warning("Please select a user on the home page.")
    st.stop()

client = get_client()

# Render nothing unless both requests succeed.
try:
    stats = client.get_dashboard_stats(user_id)
    recent = client.get_recent_events(user_id)
except APIError as e:
    st.error(f"Failed to load dashboard data: {e.detail}")
    st.stop()

render_stat_cards(stats)
render_recent_events(recent)
