# pages/auth/admin_login.py
import streamlit as st
from config.settings import ADMIN_EMAIL, ADMIN_DEMO_PASSWORD, is_development
from database.connection import DatabaseError
from state.session import get_store
from utils.auth.auth_utils import check_admin_credentials
from utils.auth.middleware import start_admin_session
from utils.validation import validate_email

def admin_login_page():
    """Admin login page"""
    st.title("🧼 Cleaning Service Admin")
    st.caption("Sign in to manage bookings, customers and operations")

    if is_development():
        st.sidebar.checkbox("Debug Mode", key="debug_mode")

    with st.form("admin_login_form"):
        email = st.text_input("Email Address", value=ADMIN_EMAIL if is_development() else "")
        password = st.text_input("Password", type="password")
        remember_me = st.checkbox("Remember me", help="Stay signed in without the 30 minute timeout")
        submit = st.form_submit_button("Log In", type="primary", use_container_width=True)

        if submit:
            if not email or not password:
                st.error("Please enter both email and password")
                return

            if st.session_state.get('debug_mode'):
                st.write(f"🔍 Debug: Attempting login for email: {email.lower()}")

            if check_admin_credentials(email, password):
                start_admin_session(email, remember_me)
                st.success("Login successful! Loading dashboard...")
                st.rerun()
            else:
                st.error("Invalid email or password")
                st.info(f"Demo credentials: {ADMIN_EMAIL} / {ADMIN_DEMO_PASSWORD}")
                return

    st.markdown("---")
    if st.button("Forgot password?"):
        st.session_state.show_reset_form = not st.session_state.get('show_reset_form', False)

    if st.session_state.get('show_reset_form'):
        _show_reset_request_form()

def _show_reset_request_form():
    """Send a password reset email"""
    with st.form("reset_request_form"):
        st.markdown("Enter your email address to receive password reset instructions.")
        email = st.text_input("Email Address", key="reset_email")
        submit = st.form_submit_button("Send Reset Link")

        if submit:
            if not validate_email(email):
                st.error("Please enter a valid email address")
                return
            try:
                get_store().reset_password(email.strip().lower())
                st.success("If an account exists for this email, a reset link has been sent.")
                st.session_state.show_reset_form = False
            except DatabaseError as e:
                print(f"Error sending reset email: {str(e)}")
                st.error(f"Error sending reset email: {str(e)}")
