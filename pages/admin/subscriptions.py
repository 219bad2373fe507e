import streamlit as st
from datetime import date, timedelta
from config.settings import BILLING_CYCLES
from state.store import DataStore
from state.selectors import subscription_summary
from utils.formatting import format_currency, format_date, format_status
from utils.validation import validate_amount
from pages.admin.common import run_action

CYCLE_DAYS = {'weekly': 7, 'bi_weekly': 14, 'monthly': 30, 'quarterly': 90}

def subscriptions_tab(store: DataStore):
    """Recurring cleaning plans"""
    st.subheader("Subscriptions")
    summary = subscription_summary(store.state)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Active", summary['active'])
    col2.metric("Monthly Revenue", format_currency(summary['monthly_revenue']))
    col3.metric("Expiring in 7 Days", summary['expiring_soon'])
    col4.metric("Cancelled", summary['cancelled'])

    for sub in store.state.subscriptions:
        with st.expander(f"{sub.customer_name or 'Unknown'} · {sub.plan_name} · {format_status(sub.status)}"):
            col1, col2 = st.columns(2)
            with col1:
                st.write(f"**Amount:** {format_currency(sub.amount)} / {format_status(sub.billing_cycle)}")
                st.write(f"**Next billing:** {format_date(sub.next_billing_date)}")
                if sub.end_date:
                    st.write(f"**Ends:** {format_date(sub.end_date)}")
            with col2:
                st.write(f"**Services used:** {sub.used_services_current_period} / {sub.max_services_per_period}")
                st.write(f"**Remaining:** {sub.remaining_services}")
                if sub.services_included:
                    st.write(f"**Includes:** {', '.join(sub.services_included)}")

            col1, col2, col3 = st.columns(3)
            with col1:
                if sub.status == 'active' and st.button("⏸️ Pause", key=f"pause_sub_{sub.id}"):
                    run_action(lambda: store.update_subscription(sub.id, {'status': 'paused'}), "Subscription paused")
            with col2:
                if sub.status == 'paused' and st.button("▶️ Resume", key=f"resume_sub_{sub.id}"):
                    run_action(lambda: store.update_subscription(sub.id, {'status': 'active'}), "Subscription resumed")
            with col3:
                if sub.status in ('active', 'paused') and st.button("✖️ Cancel", key=f"cancel_sub_{sub.id}"):
                    run_action(
                        lambda: store.update_subscription(sub.id, {'status': 'cancelled', 'auto_renewal': False}),
                        "Subscription cancelled"
                    )

    st.markdown("---")
    st.subheader("New Subscription")
    _create_subscription_form(store)

def _create_subscription_form(store: DataStore):
    users = store.state.users
    if not users:
        st.info("No customers available")
        return
    service_names = [s.name for s in store.state.services]
    with st.form("new_subscription_form"):
        user = st.selectbox("Customer", users, format_func=lambda u: u.full_name or u.email)
        col1, col2 = st.columns(2)
        with col1:
            plan_name = st.text_input("Plan Name")
            billing_cycle = st.selectbox("Billing Cycle", BILLING_CYCLES, index=2, format_func=format_status)
            amount = st.number_input("Amount", min_value=0.0, step=500.0)
        with col2:
            start_date = st.date_input("Start Date", value=date.today())
            max_services = st.number_input("Services per Period", min_value=1, value=4)
            included = st.multiselect("Services Included", service_names)

        if st.form_submit_button("Create Subscription"):
            if not plan_name:
                st.error("Please enter a plan name")
                return
            next_billing = start_date + timedelta(days=CYCLE_DAYS.get(billing_cycle, 30))
            run_action(
                lambda: store.create_subscription({
                    'user_id': user.id,
                    'plan_name': plan_name,
                    'plan_type': billing_cycle,
                    'billing_cycle': billing_cycle,
                    'status': 'active',
                    'start_date': start_date.isoformat(),
                    'next_billing_date': next_billing.isoformat(),
                    'amount': validate_amount(amount),
                    'services_included': included,
                    'max_services_per_period': int(max_services),
                    'used_services_current_period': 0,
                    'auto_renewal': True
                }),
                "Subscription created"
            )
