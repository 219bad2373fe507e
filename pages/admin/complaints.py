import streamlit as st
from config.settings import COMPLAINT_TYPES, COMPLAINT_STATUSES, PRIORITIES
from state.store import DataStore
from state.selectors import complaint_summary
from utils.formatting import format_datetime, format_status
from pages.admin.common import run_action, status_index

PRIORITY_ICONS = {'low': '⚪', 'medium': '🔵', 'high': '🟠', 'urgent': '🔴'}

def complaints_tab(store: DataStore):
    """Customer complaints"""
    st.subheader("Complaints")
    summary = complaint_summary(store.state)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("New", summary['new'])
    col2.metric("Investigating", summary['investigating'])
    col3.metric("Resolved", summary['resolved'])
    col4.metric("This Month", summary['this_month'])

    for complaint in store.state.user_complaints:
        icon = PRIORITY_ICONS.get(complaint.priority, '⚪')
        with st.expander(
            f"{icon} {complaint.subject} · {complaint.customer_name or 'Unknown'} · {format_status(complaint.status)}"
        ):
            st.caption(
                f"{format_status(complaint.complaint_type)} · {format_datetime(complaint.created_at)}"
            )
            st.write(complaint.description)
            st.write(f"**Contact:** {complaint.customer_email or '-'} {complaint.customer_phone or ''}")
            if complaint.resolved_at:
                st.write(f"**Resolved:** {format_datetime(complaint.resolved_at)}")

            with st.form(key=f"complaint_form_{complaint.id}"):
                col1, col2 = st.columns(2)
                with col1:
                    status = st.selectbox(
                        "Status",
                        COMPLAINT_STATUSES,
                        index=status_index(COMPLAINT_STATUSES, complaint.status),
                        format_func=format_status
                    )
                with col2:
                    assigned_to = st.text_input("Assigned To", value=complaint.assigned_to or "")
                notes = st.text_area("Resolution Notes", value=complaint.resolution_notes or "")
                if st.form_submit_button("Update Complaint"):
                    run_action(
                        lambda: store.update_user_complaint(complaint.id, {
                            'status': status,
                            'assigned_to': assigned_to or None,
                            'resolution_notes': notes or None
                        }),
                        "Complaint updated"
                    )

    st.markdown("---")
    st.subheader("Log Complaint")
    _log_complaint_form(store)

def _log_complaint_form(store: DataStore):
    users = store.state.users
    if not users:
        st.info("No customers available")
        return
    with st.form("new_complaint_form"):
        user = st.selectbox("Customer", users, format_func=lambda u: u.full_name or u.email)
        user_bookings = [b for b in store.state.bookings if b.user_id == user.id]
        col1, col2 = st.columns(2)
        with col1:
            complaint_type = st.selectbox("Type", COMPLAINT_TYPES, format_func=format_status)
            priority = st.selectbox("Priority", PRIORITIES, index=1, format_func=format_status)
        with col2:
            booking = st.selectbox(
                "Related Booking",
                [None] + user_bookings,
                format_func=lambda b: "None" if b is None else f"{b.service_name} · {b.date}"
            )
            subject = st.text_input("Subject")
        description = st.text_area("Description")

        if st.form_submit_button("Log Complaint"):
            if not subject or not description:
                st.error("Please enter a subject and description")
                return
            run_action(
                lambda: store.create_user_complaint({
                    'user_id': user.id,
                    'booking_id': booking.id if booking else None,
                    'complaint_type': complaint_type,
                    'subject': subject,
                    'description': description,
                    'priority': priority,
                    'status': 'new'
                }),
                "Complaint logged"
            )
