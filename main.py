import streamlit as st
from config.settings import configure_page

# Set page configuration must be the first Streamlit command
configure_page()

import sys
import os

# Add project root to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.append(project_root)

from config.settings import load_css, initialize_session_state, is_development
from pages.auth.admin_login import admin_login_page
from pages.dashboard import dashboard_page
from utils.auth.middleware import is_admin_authenticated


def main():
    initialize_session_state()
    load_css()

    current_page = st.session_state.get('page', 'login')

    if is_development():
        st.sidebar.write(f"🔍 Debug: Current page: {current_page}")
        store = st.session_state.get('store')
        if store is not None:
            st.sidebar.write(f"🔍 Debug: Realtime: {'Live' if store.state.realtime_connected else 'Offline'}")
            st.sidebar.write(f"🔍 Debug: Loading: {store.state.loading}")

    # Route to appropriate page
    if is_admin_authenticated():
        dashboard_page()
    else:
        admin_login_page()

if __name__ == "__main__":
    main()
