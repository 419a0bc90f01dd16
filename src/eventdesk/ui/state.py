"""Session-state helpers for the Streamlit UI.

No ORM, no DB; only reads/writes ``st.session_state``.
"""
import streamlit as st
from typing import Optional


def init_session() -> None:
    """Initialize session state variables."""
    if "user_id" not in st.session_state:
        st.session_state["user_id"] = None


def get_user_id() -> Optional[int]:
    """Get the user whose dashboard is shown."""
    return st.session_state.get("user_id")


def set_user_id(user_id: int) -> None:
    st.session_state["user_id"] = user_id
