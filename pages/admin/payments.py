import streamlit as st
import pandas as pd
from config.settings import PAYMENT_METHODS, PAYMENT_STATUSES, CURRENCY
from state.store import DataStore
from state.selectors import payment_summary
from utils.formatting import format_currency, format_date, format_status
from utils.validation import validate_amount
from pages.admin.common import run_action

def payments_frame(payments) -> pd.DataFrame:
    """Payments table rows; payments created by a realtime event carry no join fields"""
    return pd.DataFrame([
        {
            "Customer": p.customer_name or "Unknown",
            "Service": p.service_name or "Unknown Service",
            "Amount": format_currency(p.amount),
            "Method": format_status(p.payment_method),
            "Status": format_status(p.payment_status),
            "Date": format_date(p.payment_date or p.created_at),
            "Transaction": p.transaction_id or ""
        }
        for p in payments
    ])

def payments_tab(store: DataStore):
    """Payment summary, table, record payment and refunds"""
    st.subheader("Payments")
    summary = payment_summary(store.state)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Payments", summary['total'])
    col2.metric("Collected", format_currency(summary['completed_amount']))
    col3.metric("Pending", summary['pending'])
    col4.metric("Refunded", format_currency(summary['refunded_amount']))

    payments = store.state.payments
    if payments:
        st.dataframe(payments_frame(payments), use_container_width=True, hide_index=True)
    else:
        st.info("No payments recorded")

    tab1, tab2 = st.tabs(["Record Payment", "Refund"])

    with tab1:
        _record_payment_form(store)

    with tab2:
        refundable = [p for p in payments if p.payment_status == 'completed']
        if not refundable:
            st.info("No completed payments to refund")
            return
        with st.form("refund_form"):
            payment = st.selectbox(
                "Payment",
                refundable,
                format_func=lambda p: f"{p.customer_name or 'Unknown'} · {p.service_name or 'Unknown Service'} · {format_currency(p.amount)}"
            )
            amount = st.number_input("Refund Amount", min_value=0.0, step=100.0)
            reason = st.text_area("Reason")
            if st.form_submit_button("Issue Refund"):
                amount = validate_amount(amount)
                if amount <= 0 or amount > payment.amount:
                    st.error("Refund amount must be between 0 and the payment amount")
                    return
                run_action(lambda: store.refund_payment(payment.id, amount, reason), "Refund recorded")

def _record_payment_form(store: DataStore):
    bookings = store.state.bookings
    if not bookings:
        st.info("No bookings to record a payment against")
        return
    with st.form("record_payment_form"):
        booking = st.selectbox(
            "Booking",
            bookings,
            format_func=lambda b: f"{b.user_name or 'Unknown'} · {b.service_name} · {format_date(b.date)}"
        )
        col1, col2 = st.columns(2)
        with col1:
            amount = st.number_input("Amount", min_value=0.0, step=100.0)
            method = st.selectbox("Method", PAYMENT_METHODS, format_func=format_status)
        with col2:
            status = st.selectbox("Status", PAYMENT_STATUSES, format_func=format_status)
            transaction_id = st.text_input("Transaction ID")

        if st.form_submit_button("Record Payment"):
            amount = validate_amount(amount)
            if amount <= 0:
                st.error("Please enter a payment amount")
                return
            run_action(
                lambda: store.create_payment({
                    'booking_id': booking.id,
                    'user_id': booking.user_id,
                    'amount': amount,
                    'currency': CURRENCY,
                    'payment_method': method,
                    'payment_status': status,
                    'transaction_id': transaction_id or None
                }),
                "Payment recorded"
            )
