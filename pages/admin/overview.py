import streamlit as st
from state.store import DataStore
from state.selectors import recent_activities
from utils.formatting import format_currency, format_datetime, format_status

def overview_tab(store: DataStore):
    """Stat cards and recent activity"""
    stats = store.state.stats
    st.subheader("Overview")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Bookings", stats.total_bookings)
    col2.metric("Total Revenue", format_currency(stats.total_revenue))
    col3.metric("Active Users", stats.active_users)
    col4.metric("Pending Bookings", stats.pending_bookings)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Today's Bookings", stats.today_bookings)
    col2.metric("Monthly Revenue", format_currency(stats.monthly_revenue))
    col3.metric("Avg. Order Value", format_currency(stats.average_order_value))
    col4.metric("Completed", stats.completed_bookings)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Pending Payments", stats.pending_payments)
    col2.metric("Active Subscriptions", stats.active_subscriptions)
    col3.metric("Laundry In Progress", stats.pending_orders)
    col4.metric("Unread Notifications", stats.unread_notifications)

    st.markdown("---")
    st.subheader("Recent Activity")
    activities = recent_activities(store.state.bookings, store.state.contact_messages)
    if not activities:
        st.info("No recent activity")
        return

    for activity in activities:
        icon = "📅" if activity.kind == 'booking' else "💬"
        with st.container():
            col1, col2 = st.columns([4, 1])
            with col1:
                st.markdown(f"{icon} **{activity.title}**")
                st.caption(f"{activity.subtitle} · {format_datetime(activity.created_at)}")
            with col2:
                st.write(format_status(activity.status))
