import streamlit as st
from state.store import DataStore
from utils.formatting import format_datetime, format_status
from pages.admin.common import run_action

STATUS_ICONS = {'new': '🔵', 'read': '⚪', 'responded': '✅'}

def contacts_tab(store: DataStore):
    """Contact form messages"""
    st.subheader("Messages")
    messages = store.state.contact_messages
    if not messages:
        st.info("No messages")
        return

    st.caption(f"{sum(1 for m in messages if m.status == 'new')} new")
    for message in messages:
        icon = STATUS_ICONS.get(message.status, '⚪')
        with st.expander(f"{icon} {message.name} · {format_datetime(message.created_at)}"):
            st.write(f"**Email:** {message.email}")
            if message.phone:
                st.write(f"**Phone:** {message.phone}")
            st.write(message.message)
            st.caption(f"Status: {format_status(message.status)}")

            col1, col2 = st.columns(2)
            with col1:
                if message.status == 'new' and st.button("Mark as Read", key=f"read_message_{message.id}"):
                    run_action(lambda: store.update_contact_message(message.id, {'status': 'read'}))
            with col2:
                if message.status != 'responded' and st.button("Mark as Responded", key=f"respond_message_{message.id}"):
                    run_action(lambda: store.update_contact_message(message.id, {'status': 'responded'}))
