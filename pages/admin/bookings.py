import streamlit as st
from config.settings import BOOKING_STATUSES
from state.store import DataStore
from state.selectors import filter_bookings
from utils.export import bookings_to_csv
from utils.formatting import format_currency, format_date, format_status
from pages.admin.common import run_action, confirm_delete, status_index

def bookings_tab(store: DataStore):
    """Bookings list with search, status filter, status change, delete and export"""
    st.subheader("Bookings")

    col1, col2, col3 = st.columns([3, 2, 1])
    with col1:
        search = st.text_input(
            "Search",
            key="booking_search",
            placeholder="Service, phone or address"
        )
    with col2:
        status = st.selectbox(
            "Status",
            ["all"] + BOOKING_STATUSES,
            key="booking_status_filter",
            format_func=lambda s: "All" if s == "all" else format_status(s)
        )
    bookings = filter_bookings(store.state.bookings, search, status)
    with col3:
        filename, csv = bookings_to_csv(store.state.bookings)
        st.download_button(
            "⬇️ Export CSV",
            data=csv,
            file_name=filename,
            mime="text/csv",
            use_container_width=True
        )

    st.caption(f"{len(bookings)} of {len(store.state.bookings)} bookings")
    if not bookings:
        st.info("No bookings found")
        return

    for booking in bookings:
        with st.expander(
            f"{booking.service_name} · {booking.user_name or 'Unknown'} · "
            f"{format_date(booking.date)} {booking.time} · {format_status(booking.status)}"
        ):
            col1, col2 = st.columns(2)
            with col1:
                st.write(f"**Customer:** {booking.user_name or 'Unknown'}")
                st.write(f"**Email:** {booking.user_email or '-'}")
                st.write(f"**Phone:** {booking.user_phone or booking.phone or '-'}")
                st.write(f"**Address:** {booking.address}")
            with col2:
                st.write(f"**Service:** {booking.service_name} ({booking.service_type})")
                st.write(f"**Amount:** {format_currency(booking.total_amount)}")
                if booking.special_instructions:
                    st.write(f"**Instructions:** {booking.special_instructions}")

            col1, col2 = st.columns([3, 1])
            with col1:
                new_status = st.selectbox(
                    "Update status",
                    BOOKING_STATUSES,
                    index=status_index(BOOKING_STATUSES, booking.status),
                    key=f"booking_status_{booking.id}",
                    format_func=format_status
                )
                if new_status != booking.status and st.button("Save status", key=f"save_booking_{booking.id}"):
                    run_action(
                        lambda: store.update_booking(booking.id, {'status': new_status}),
                        "Booking updated"
                    )
            with col2:
                confirm_delete(
                    'booking',
                    booking.id,
                    f"Booking {booking.service_name}",
                    lambda: store.delete_booking(booking.id)
                )
