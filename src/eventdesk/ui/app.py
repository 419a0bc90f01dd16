"""Streamlit entry point: ``streamlit run src/eventdesk/ui/app.py``."""
import streamlit as st
from eventdesk.ui.state import init_session, get_user_id, set_user_id
from eventdesk.ui.validation import run_all_checks

st.set_page_config(page_title="EventDesk", layout="wide")
init_session()

st.title("EventDesk")
st.write("Plan events, track RSVPs and keep your attendees informed.")

errors = run_all_checks()
for err in errors:
    st.error(err)

st.sidebar.subheader("Account")
current = get_user_id()
user_id = st.sidebar.number_input(
    "User ID", min_value=1, step=1, value=current if current else 1,
)
if st.sidebar.button("Use this account"):
    set_user_id(int(user_id))
    st.rerun()

if current:
    st.sidebar.success(f"Viewing as user #{current}")
else:
    st.sidebar.warning("No user selected")
