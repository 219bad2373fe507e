import streamlit as st
from state.store import DataStore
from state.selectors import notification_summary, visible_notifications
from utils.formatting import format_datetime, format_status
from pages.admin.common import run_action

PRIORITY_ICONS = {'low': '⚪', 'medium': '🔵', 'high': '🟠', 'urgent': '🔴'}

def notifications_tab(store: DataStore):
    st.subheader("Notifications")
    summary = notification_summary(store.state)

    col1, col2, col3 = st.columns(3)
    col1.metric("Unread", summary['unread'])
    col2.metric("Action Required", summary['action_required'])
    col3.metric("Today", summary['today'])

    notifications = visible_notifications(store.state.admin_notifications)
    if not notifications:
        st.info("No notifications")
        return

    for notification in notifications:
        icon = PRIORITY_ICONS.get(notification.priority, '⚪')
        unread = "**" if notification.status == 'unread' else ""
        with st.container():
            col1, col2, col3 = st.columns([5, 1, 1])
            with col1:
                st.markdown(f"{icon} {unread}{notification.title}{unread}")
                st.caption(
                    f"{format_status(notification.type)} · {format_datetime(notification.created_at)}"
                    + (" · ⚠️ Action required" if notification.action_required else "")
                )
                st.write(notification.message)
            with col2:
                if notification.status == 'unread' and st.button("Mark Read", key=f"read_notification_{notification.id}"):
                    run_action(lambda: store.mark_notification_as_read(notification.id))
            with col3:
                if st.button("Archive", key=f"archive_notification_{notification.id}"):
                    run_action(lambda: store.archive_notification(notification.id))
