import streamlit as st
from typing import Optional
from config.settings import get_supabase_config, is_development
from database.connection import SupabaseConnection
from database.realtime import ChangeFeed
from state.store import DataStore


def get_store() -> DataStore:
    """Per-session data store, created on first use"""
    if 'store' not in st.session_state:
        st.session_state.store = DataStore(
            SupabaseConnection.get_instance(),
            debug=is_development() or st.session_state.get('debug_mode', False)
        )
    return st.session_state.store


def get_change_feed() -> Optional[ChangeFeed]:
    """Start the change feed for this session if it is not running yet"""
    feed = st.session_state.get('change_feed')
    if feed is None:
        config = get_supabase_config()
        feed = ChangeFeed(config['url'], config['anon_key'])
        feed.start()
        st.session_state.change_feed = feed
    return feed


def stop_change_feed() -> None:
    feed = st.session_state.pop('change_feed', None)
    if feed is not None:
        feed.stop()
