# /pages/settings/__init__.py
import streamlit as st
from state.store import DataStore
from .services import services_settings_page
from .preferences import preferences_settings_page

def settings_tab(store: DataStore):
    """Settings tab: services and preferences"""
    st.subheader("Settings")
    selected = st.radio("Section", ["Services", "Preferences"], horizontal=True, label_visibility="collapsed")
    if selected == "Services":
        services_settings_page(store)
    else:
        preferences_settings_page()

__all__ = [
    'settings_tab',
    'services_settings_page',
    'preferences_settings_page'
]
