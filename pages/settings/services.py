import streamlit as st
from config.settings import SERVICE_CATEGORIES
from state.store import DataStore
from utils.formatting import format_currency
from utils.validation import validate_amount
from pages.admin.common import run_action, status_index

def services_settings_page(store: DataStore):
    """Services management settings page"""
    st.subheader("Services Management")

    # Initialize session state for editing
    if 'editing_service' not in st.session_state:
        st.session_state.editing_service = None

    tab1, tab2 = st.tabs(["Current Services", "Add New Service"])

    # Current Services Tab
    with tab1:
        if st.button("Show inactive services", key="load_all_services"):
            run_action(lambda: store.fetch_services(active_only=False))
        services = store.state.services
        if not services:
            st.warning("No services found.")

        # Direct display of services grouped by category
        categories = sorted(set(service.category for service in services))
        for category in categories:
            st.markdown(f"**{category or 'Uncategorized'}**")
            for service in [s for s in services if s.category == category]:
                status = "🟢" if service.is_active else "🔴"
                if st.button(
                    f"{status} {service.name} - {format_currency(service.base_price)}",
                    key=f"edit_button_{service.id}",
                    use_container_width=True
                ):
                    st.session_state.editing_service = service.id

                if st.session_state.get('editing_service') == service.id:
                    _edit_service_form(store, service)

    # Add New Service Tab
    with tab2:
        with st.form("new_service_form"):
            col1, col2 = st.columns(2)

            with col1:
                name = st.text_input("Service Name")
                category = st.selectbox("Category", SERVICE_CATEGORIES)
                duration = st.number_input("Duration (hours)", min_value=0.5, max_value=12.0, value=2.0, step=0.5)

            with col2:
                base_price = st.number_input("Base Price", min_value=0.0, step=500.0)
                is_active = st.checkbox("Active", value=True)

            description = st.text_area("Description")

            if st.form_submit_button("Add Service", use_container_width=True):
                if not name:
                    st.error("Service name is required")
                    return
                run_action(
                    lambda: store.create_service({
                        'name': name.strip(),
                        'description': description,
                        'base_price': validate_amount(base_price),
                        'category': category,
                        'duration_hours': float(duration),
                        'is_active': is_active
                    }),
                    "Service added successfully!"
                )

def _edit_service_form(store: DataStore, service):
    with st.form(key=f"edit_form_{service.id}"):
        col1, col2 = st.columns(2)

        with col1:
            new_name = st.text_input("Service Name", value=service.name)
            new_category = st.selectbox(
                "Category",
                SERVICE_CATEGORIES,
                index=status_index(SERVICE_CATEGORIES, service.category)
            )
            new_duration = st.number_input(
                "Duration (hours)",
                min_value=0.5,
                max_value=12.0,
                value=float(service.duration_hours or 1.0),
                step=0.5
            )

        with col2:
            new_price = st.number_input("Base Price", value=float(service.base_price or 0), min_value=0.0, step=500.0)
            new_status = st.checkbox("Active", value=service.is_active)

        new_description = st.text_area("Description", value=service.description or "")

        col1, col2 = st.columns(2)
        with col1:
            if st.form_submit_button("Save Changes", use_container_width=True):
                st.session_state.editing_service = None
                run_action(
                    lambda: store.update_service(service.id, {
                        'name': new_name,
                        'category': new_category,
                        'description': new_description,
                        'base_price': new_price,
                        'is_active': new_status,
                        'duration_hours': new_duration
                    }),
                    "Service updated successfully!"
                )
        with col2:
            if st.form_submit_button("Cancel", use_container_width=True):
                st.session_state.editing_service = None
                st.rerun()
