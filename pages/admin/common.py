import streamlit as st
from typing import Callable, Any, Optional
from database.connection import DatabaseError
from state.store import AuthenticationRequired

def run_action(action: Callable[[], Any], success_message: Optional[str] = None, rerun: bool = True) -> bool:
    """Run a store call, reporting failures with st.error"""
    try:
        action()
    except (DatabaseError, AuthenticationRequired) as e:
        print(f"Error: {str(e)}")
        st.error(f"Error: {str(e)}")
        if st.session_state.get('debug_mode'):
            st.exception(e)
        return False
    if rerun:
        if success_message:
            # Shown by show_flash on the next run
            st.session_state['flash_message'] = success_message
        st.rerun()
    elif success_message:
        st.success(success_message)
    return True

def show_flash() -> None:
    """Show and clear the message left by the last run_action"""
    message = st.session_state.pop('flash_message', None)
    if message:
        st.success(message)

def confirm_delete(kind: str, row_id: str, label: str, on_confirm: Callable[[], Any]) -> None:
    """
    Two-step delete: the first click arms the confirmation stored in
    session state, the second performs on_confirm.
    """
    pending = st.session_state.get('pending_delete')
    if pending == (kind, row_id):
        st.warning(f"Delete {label}? This cannot be undone.")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Yes, delete", key=f"confirm_delete_{kind}_{row_id}", type="primary"):
                st.session_state.pending_delete = None
                run_action(on_confirm, f"{label} deleted")
        with col2:
            if st.button("Cancel", key=f"cancel_delete_{kind}_{row_id}"):
                st.session_state.pending_delete = None
                st.rerun()
    elif st.button("🗑️ Delete", key=f"delete_{kind}_{row_id}"):
        st.session_state.pending_delete = (kind, row_id)
        st.rerun()

def status_index(options, value) -> int:
    return options.index(value) if value in options else 0
