import streamlit as st

def preferences_settings_page():
    """Dashboard preferences, kept for the browser session only"""
    st.subheader("Preferences")
    preferences = st.session_state.preferences

    with st.form("preferences_form"):
        email_notifications = st.checkbox("Email notifications", value=preferences['email_notifications'])
        sms_notifications = st.checkbox("SMS notifications", value=preferences['sms_notifications'])
        auto_confirm = st.checkbox("Auto-confirm new bookings", value=preferences['auto_confirm_bookings'])
        maintenance_mode = st.checkbox("Maintenance mode", value=preferences['maintenance_mode'])

        if st.form_submit_button("Save Preferences"):
            st.session_state.preferences = {
                'email_notifications': email_notifications,
                'sms_notifications': sms_notifications,
                'auto_confirm_bookings': auto_confirm,
                'maintenance_mode': maintenance_mode
            }
            st.success("Preferences saved")
