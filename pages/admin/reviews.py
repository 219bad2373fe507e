import streamlit as st
from state.store import DataStore
from state.selectors import review_summary
from utils.formatting import format_date, format_status
from pages.admin.common import run_action

def reviews_tab(store: DataStore):
    """Customer reviews moderation"""
    st.subheader("Reviews")
    summary = review_summary(store.state)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Average Rating", f"{summary['average']:.1f} ⭐")
    col2.metric("Total Reviews", summary['total'])
    col3.metric("Pending", summary['pending'])
    col4.metric("Positive (4+)", summary['positive'])

    for review in store.state.reviews:
        stars = "⭐" * int(review.rating or 0)
        with st.expander(
            f"{stars} {review.title or review.service_name} · {review.customer_name or 'Unknown'} · "
            f"{format_status(review.status)}"
        ):
            st.caption(f"{review.service_name} · {format_date(review.created_at)}")
            if review.comment:
                st.write(review.comment)

            col1, col2, col3, col4 = st.columns(4)
            col1.write(f"Quality: {review.service_quality_rating}/5")
            col2.write(f"Staff: {review.staff_rating}/5")
            col3.write(f"Timeliness: {review.timeliness_rating}/5")
            col4.write(f"Value: {review.value_rating}/5")
            st.write("👍 Would recommend" if review.would_recommend else "👎 Would not recommend")

            if review.admin_response:
                st.info(f"Response: {review.admin_response}")

            if review.status == 'pending':
                response = st.text_area("Response (optional)", key=f"review_response_{review.id}")
                col1, col2 = st.columns(2)
                with col1:
                    if st.button("✅ Approve", key=f"approve_review_{review.id}"):
                        run_action(lambda: store.approve_review(review.id, response or None), "Review approved")
                with col2:
                    if st.button("❌ Reject", key=f"reject_review_{review.id}"):
                        run_action(lambda: store.reject_review(review.id, response or None), "Review rejected")
