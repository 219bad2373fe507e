import streamlit as st
from functools import wraps
from datetime import datetime, timedelta
from typing import Callable, Optional
from config.settings import SESSION_TIMEOUT_MINUTES, is_development

ADMIN_SESSION_KEYS = [
    'admin_authenticated',
    'admin_email',
    'remember_me',
    'last_activity',
    'initial_load_done',
    'pending_delete'
]

def is_admin_authenticated() -> bool:
    """Check if the admin is logged in"""
    authenticated = bool(st.session_state.get('admin_authenticated'))
    if is_development():
        st.sidebar.write(f"🔍 Debug: Admin session: {'Yes' if authenticated else 'No'}")
    return authenticated

def start_admin_session(email: str, remember_me: bool = False) -> None:
    st.session_state.update({
        'admin_authenticated': True,
        'admin_email': email,
        'remember_me': remember_me,
        'last_activity': datetime.now().timestamp(),
        'page': 'dashboard'
    })

def require_admin(func: Callable) -> Callable:
    """Decorator to require an admin session"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not is_admin_authenticated():
            st.session_state.page = 'login'
            st.rerun()
        check_session_timeout()
        return func(*args, **kwargs)
    return wrapper

def session_expired(last_activity: Optional[float], remember_me: bool, now: Optional[datetime] = None) -> bool:
    """True when the session has been idle longer than the timeout"""
    if remember_me or not last_activity:
        return False
    now = now or datetime.now()
    timeout = datetime.fromtimestamp(last_activity) + timedelta(minutes=SESSION_TIMEOUT_MINUTES)
    return now > timeout

def check_session_timeout() -> None:
    """Check for session timeout and clear if inactive"""
    if session_expired(st.session_state.get('last_activity'), st.session_state.get('remember_me', False)):
        clear_admin_session("Session timeout due to inactivity")
        st.rerun()

    # Update last activity
    st.session_state.last_activity = datetime.now().timestamp()

def clear_admin_session(reason: Optional[str] = None) -> None:
    """Clear admin session state"""
    if reason:
        print(f"Admin session ended: {reason}")
    for key in ADMIN_SESSION_KEYS:
        st.session_state.pop(key, None)
    st.session_state.page = 'login'
