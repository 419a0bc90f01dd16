import streamlit as st

st.title("Communications")
st.caption("Send messages and manage communication with your attendees.")

with st.container(border=True):
    st.subheader(":material/chat: Coming Soon")
    st.write(
        "This page will provide tools to send messages to attendees, manage email "
        "templates, and track message delivery status."
    )
    st.button("Create Message Template", icon=":material/add:", key="create_template")
