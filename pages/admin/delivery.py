import streamlit as st
from datetime import date
from config.settings import DELIVERY_TYPES, DELIVERY_STATUSES
from state.store import DataStore
from state.selectors import delivery_summary
from utils.formatting import format_date, format_status
from pages.admin.common import run_action, status_index

def delivery_tab(store: DataStore):
    """Pickup and delivery scheduling"""
    st.subheader("Pickup & Delivery")
    summary = delivery_summary(store.state)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Scheduled Pickups", summary['scheduled_pickups'])
    col2.metric("In Transit", summary['in_transit'])
    col3.metric("Completed Today", summary['completed_today'])
    col4.metric("Scheduled", summary['scheduled'])

    for delivery in store.state.pickup_deliveries:
        icon = "📦" if delivery.type == 'pickup' else "🚚"
        with st.expander(
            f"{icon} {delivery.customer_name or 'Unknown'} · {format_date(delivery.scheduled_date)} "
            f"{delivery.scheduled_time} · {format_status(delivery.status)}"
        ):
            col1, col2 = st.columns(2)
            with col1:
                st.write(f"**Service:** {delivery.service_name or 'Unknown Service'}")
                st.write(f"**Address:** {delivery.address or '-'}")
                st.write(f"**Phone:** {delivery.customer_phone or '-'}")
            with col2:
                st.write(f"**Driver:** {delivery.driver_name or 'Unassigned'}")
                if delivery.driver_phone:
                    st.write(f"**Driver phone:** {delivery.driver_phone}")
                if delivery.tracking_notes:
                    st.write(f"**Notes:** {delivery.tracking_notes}")

            new_status = st.selectbox(
                "Update status",
                DELIVERY_STATUSES,
                index=status_index(DELIVERY_STATUSES, delivery.status),
                key=f"delivery_status_{delivery.id}",
                format_func=format_status
            )
            if new_status != delivery.status and st.button("Save status", key=f"save_delivery_{delivery.id}"):
                updates = {'status': new_status}
                if new_status == 'completed':
                    updates['actual_date'] = date.today().isoformat()
                run_action(lambda: store.update_pickup_delivery(delivery.id, updates), "Delivery updated")

    st.markdown("---")
    st.subheader("Schedule Pickup / Delivery")
    _schedule_form(store)

def _schedule_form(store: DataStore):
    bookings = store.state.bookings
    if not bookings:
        st.info("No bookings to schedule against")
        return
    with st.form("schedule_delivery_form"):
        booking = st.selectbox(
            "Booking",
            bookings,
            format_func=lambda b: f"{b.user_name or 'Unknown'} · {b.service_name} · {format_date(b.date)}"
        )
        col1, col2 = st.columns(2)
        with col1:
            delivery_type = st.selectbox("Type", DELIVERY_TYPES, format_func=format_status)
            scheduled_date = st.date_input("Date", value=date.today())
            scheduled_time = st.time_input("Time")
        with col2:
            address = st.text_input("Address", value=booking.address if booking else "")
            driver_name = st.text_input("Driver Name")
            driver_phone = st.text_input("Driver Phone")

        if st.form_submit_button("Schedule"):
            if not address:
                st.error("Please enter an address")
                return
            address_field = 'pickup_address' if delivery_type == 'pickup' else 'delivery_address'
            run_action(
                lambda: store.create_pickup_delivery({
                    'booking_id': booking.id,
                    'user_id': booking.user_id,
                    'type': delivery_type,
                    'status': 'scheduled',
                    address_field: address,
                    'scheduled_date': scheduled_date.isoformat(),
                    'scheduled_time': scheduled_time.strftime('%H:%M'),
                    'driver_name': driver_name or None,
                    'driver_phone': driver_phone or None
                }),
                f"{format_status(delivery_type)} scheduled"
            )
