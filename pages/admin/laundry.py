import streamlit as st
from datetime import date, timedelta
from config.settings import LAUNDRY_ORDER_TYPES, LAUNDRY_ORDER_STATUSES
from database.connection import DatabaseError
from state.store import DataStore
from state.selectors import laundry_summary
from utils.formatting import format_currency, format_date, format_status
from pages.admin.common import run_action, status_index

def laundry_tab(store: DataStore):
    """Laundry orders"""
    col1, col2 = st.columns([5, 1])
    with col1:
        st.subheader("Laundry Orders")
    with col2:
        if st.button("🔄 Refresh", key="refresh_laundry"):
            try:
                store.fetch_laundry_orders()
            except DatabaseError as e:
                st.error(f"Error fetching laundry orders: {str(e)}")

    summary = laundry_summary(store.state)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Orders", summary['total'])
    col2.metric("In Progress", summary['pending'])
    col3.metric("Completed Today", summary['completed_today'])
    col4.metric("Revenue Today", format_currency(summary['revenue_today']))

    for order in store.state.laundry_orders:
        with st.expander(
            f"#{order.order_number or order.id} · {order.customer_name or 'Unknown'} · {format_status(order.status)}"
        ):
            col1, col2 = st.columns(2)
            with col1:
                st.write(f"**Type:** {format_status(order.order_type)}")
                st.write(f"**Items:** {order.item_count}")
                st.write(f"**Total:** {format_currency(order.total_amount)}")
            with col2:
                st.write(f"**Pickup:** {format_date(order.pickup_date)}")
                st.write(f"**Delivery:** {format_date(order.delivery_date)}")
                if order.special_instructions:
                    st.write(f"**Instructions:** {order.special_instructions}")

            for item in order.items:
                st.caption(
                    f"{item.get('quantity', 0)} × {item.get('item_type', '')} "
                    f"@ {format_currency(item.get('price_per_item', 0))}"
                )

            new_status = st.selectbox(
                "Update status",
                LAUNDRY_ORDER_STATUSES,
                index=status_index(LAUNDRY_ORDER_STATUSES, order.status),
                key=f"laundry_status_{order.id}",
                format_func=format_status
            )
            if new_status != order.status and st.button("Save status", key=f"save_laundry_{order.id}"):
                run_action(lambda: store.update_laundry_order(order.id, {'status': new_status}), "Order updated")

    st.markdown("---")
    st.subheader("New Laundry Order")
    _create_order_form(store)

def _create_order_form(store: DataStore):
    users = store.state.users
    if not users:
        st.info("No customers available")
        return
    with st.form("new_laundry_order_form"):
        user = st.selectbox("Customer", users, format_func=lambda u: u.full_name or u.email)
        col1, col2 = st.columns(2)
        with col1:
            order_type = st.selectbox("Order Type", LAUNDRY_ORDER_TYPES, format_func=format_status)
            item_type = st.text_input("Item", value="Shirt")
            quantity = st.number_input("Quantity", min_value=1, value=1)
            price = st.number_input("Price per Item", min_value=0.0, step=100.0)
        with col2:
            pickup_date = st.date_input("Pickup Date", value=date.today())
            delivery_date = st.date_input("Delivery Date", value=date.today() + timedelta(days=2))
            instructions = st.text_area("Special Instructions")

        if st.form_submit_button("Create Order"):
            if delivery_date < pickup_date:
                st.error("Delivery date cannot be before pickup date")
                return
            items = [{
                'item_type': item_type,
                'quantity': int(quantity),
                'price_per_item': float(price),
                'special_instructions': None
            }]
            order_number = f"LO-{date.today().strftime('%Y%m%d')}-{len(store.state.laundry_orders) + 1:04d}"
            run_action(
                lambda: store.create_laundry_order({
                    'user_id': user.id,
                    'order_number': order_number,
                    'order_type': order_type,
                    'service_type': order_type,
                    'items': items,
                    'item_count': int(quantity),
                    'pickup_date': pickup_date.isoformat(),
                    'delivery_date': delivery_date.isoformat(),
                    'status': 'received',
                    'total_amount': int(quantity) * float(price),
                    'special_instructions': instructions or None
                }),
                "Laundry order created"
            )
