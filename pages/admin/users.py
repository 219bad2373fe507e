import streamlit as st
from state.store import DataStore
from state.selectors import users_with_stats
from utils.formatting import format_currency, format_date
from utils.validation import validate_phone
from pages.admin.common import run_action, confirm_delete

def users_tab(store: DataStore):
    """Customers with booking totals, edit and delete"""
    st.subheader("Users")
    rows = users_with_stats(store.state)
    if not rows:
        st.info("No users found")
        return

    for row in rows:
        user = row['user']
        badge = "🟢 Active" if row['is_active'] else "⚪ Inactive"
        with st.expander(f"{user.full_name or user.email} · {badge}"):
            col1, col2, col3 = st.columns(3)
            col1.metric("Bookings", row['bookings_count'])
            col2.metric("Total Spent", format_currency(row['total_spent']))
            col3.write(f"**Joined:** {format_date(user.created_at)}")

            if st.session_state.get('editing_user') == user.id:
                with st.form(key=f"edit_user_{user.id}"):
                    full_name = st.text_input("Full Name", value=user.full_name)
                    phone = st.text_input("Phone", value=user.phone or "")

                    col1, col2 = st.columns(2)
                    with col1:
                        save = st.form_submit_button("Save Changes", use_container_width=True)
                    with col2:
                        cancel = st.form_submit_button("Cancel", use_container_width=True)

                    if save:
                        updates = {'full_name': full_name.strip()}
                        if phone:
                            is_valid, formatted = validate_phone(phone)
                            if not is_valid:
                                st.error("Please enter a valid phone number")
                                return
                            updates['phone'] = formatted
                        st.session_state.editing_user = None
                        run_action(lambda: store.update_user(user.id, updates), "User updated")
                    if cancel:
                        st.session_state.editing_user = None
                        st.rerun()
            else:
                col1, col2 = st.columns(2)
                with col1:
                    st.write(f"**Email:** {user.email}")
                    st.write(f"**Phone:** {user.phone or '-'}")
                    if st.button("✏️ Edit", key=f"edit_user_button_{user.id}"):
                        st.session_state.editing_user = user.id
                        st.rerun()
                with col2:
                    confirm_delete(
                        'user',
                        user.id,
                        f"User {user.full_name or user.email}",
                        lambda: store.delete_user(user.id)
                    )
