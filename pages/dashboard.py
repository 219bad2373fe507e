# pages/dashboard.py
import streamlit as st
from config.settings import DASHBOARD_TABS, REALTIME_POLL_SECONDS, ConfigurationError
from database.connection import DatabaseError
from state.session import get_store, get_change_feed, stop_change_feed
from state.reducer import Action, SET_ERROR
from utils.auth.middleware import require_admin, clear_admin_session
from pages.admin import (
    overview_tab,
    bookings_tab,
    users_tab,
    contacts_tab,
    payments_tab,
    subscriptions_tab,
    laundry_tab,
    delivery_tab,
    notifications_tab,
    reviews_tab,
    complaints_tab
)
from pages.settings import settings_tab
from pages.admin.common import show_flash

TAB_PAGES = {
    'overview': overview_tab,
    'bookings': bookings_tab,
    'users': users_tab,
    'contacts': contacts_tab,
    'payments': payments_tab,
    'subscriptions': subscriptions_tab,
    'laundry': laundry_tab,
    'delivery': delivery_tab,
    'notifications': notifications_tab,
    'reviews': reviews_tab,
    'complaints': complaints_tab,
    'settings': settings_tab
}

def _initial_load(store) -> None:
    if st.session_state.get('initial_load_done'):
        return
    with st.spinner("Loading dashboard data..."):
        failed = store.load_dashboard_data()
    if failed:
        st.warning(f"Some data could not be loaded: {', '.join(failed)}")
    st.session_state.initial_load_done = True

@st.fragment(run_every=REALTIME_POLL_SECONDS)
def _realtime_sync():
    """Drain change-feed events and rerun the page when data changed"""
    store = get_store()
    feed = st.session_state.get('change_feed')
    if feed is None:
        return
    was_connected = store.state.realtime_connected
    applied = store.sync_realtime(feed)
    if applied or was_connected != store.state.realtime_connected:
        st.rerun(scope="app")

def _header(store) -> None:
    col1, col2, col3 = st.columns([6, 2, 1])
    with col1:
        st.title("Cleaning Service Admin")
    with col2:
        if store.state.realtime_connected:
            st.markdown('<span class="realtime-live">● Live</span>', unsafe_allow_html=True)
        else:
            st.markdown('<span class="realtime-offline">● Offline</span>', unsafe_allow_html=True)
            feed = st.session_state.get('change_feed')
            if feed is not None and feed.last_error:
                st.caption(feed.last_error)
    with col3:
        if st.button("Logout", key="admin_logout"):
            _logout(store)

def _logout(store) -> None:
    try:
        store.sign_out()
    except DatabaseError as e:
        print(f"Error signing out: {str(e)}")
    stop_change_feed()
    st.session_state.pop('store', None)
    clear_admin_session("Admin logout")
    st.rerun()

def _sidebar() -> str:
    with st.sidebar:
        st.markdown(f"**{st.session_state.get('admin_email', '')}**")
        active = st.radio(
            "Navigation",
            list(DASHBOARD_TABS),
            index=list(DASHBOARD_TABS).index(st.session_state.get('active_tab', 'overview')),
            format_func=lambda tab: DASHBOARD_TABS[tab],
            label_visibility="collapsed"
        )
    st.session_state.active_tab = active
    return active

@require_admin
def dashboard_page():
    """Admin dashboard shell"""
    try:
        store = get_store()
    except ConfigurationError as e:
        st.error(str(e))
        return

    try:
        get_change_feed()
    except ConfigurationError as e:
        print(f"Change feed not started: {str(e)}")

    _initial_load(store)
    _header(store)
    _realtime_sync()

    if store.state.error:
        col1, col2 = st.columns([6, 1])
        col1.error(store.state.error)
        if col2.button("Dismiss", key="dismiss_error"):
            store.dispatch(Action(SET_ERROR, None))
            st.rerun()
    show_flash()

    active = _sidebar()
    TAB_PAGES[active](store)
