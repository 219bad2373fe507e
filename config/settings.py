import os
import streamlit as st
from streamlit.errors import StreamlitAPIException
from typing import Dict, Any, List, Optional

# Admin login
ADMIN_EMAIL = "admin@cleaningservice.com"
ADMIN_DEMO_PASSWORD = "admin123"
SESSION_TIMEOUT_MINUTES = 30

# Backend tables mirrored into local state
TABLES = [
    "users",
    "bookings",
    "services",
    "contact_messages",
    "pickup_deliveries",
    "user_complaints",
    "payments",
    "subscriptions",
    "laundry_orders",
    "admin_notifications",
    "reviews"
]

REALTIME_SCHEMA = "public"
REALTIME_POLL_SECONDS = 5

# Status enumerations
BOOKING_STATUSES = ["pending", "confirmed", "in_progress", "completed", "cancelled"]
CONTACT_MESSAGE_STATUSES = ["new", "read", "responded"]
DELIVERY_TYPES = ["pickup", "delivery"]
DELIVERY_STATUSES = ["scheduled", "in_transit", "completed", "cancelled"]
COMPLAINT_TYPES = ["service_quality", "billing", "staff_behavior", "scheduling", "other"]
COMPLAINT_STATUSES = ["new", "investigating", "resolved", "closed"]
PRIORITIES = ["low", "medium", "high", "urgent"]
PAYMENT_METHODS = ["card", "cash", "bank_transfer", "digital_wallet"]
PAYMENT_STATUSES = ["pending", "processing", "completed", "failed", "refunded"]
BILLING_CYCLES = ["weekly", "bi_weekly", "monthly", "quarterly"]
SUBSCRIPTION_STATUSES = ["active", "paused", "cancelled", "expired"]
LAUNDRY_ORDER_TYPES = ["wash_fold", "dry_cleaning", "ironing", "special_care"]
LAUNDRY_ORDER_STATUSES = [
    "received",
    "washing",
    "drying",
    "folding",
    "ready",
    "out_for_delivery",
    "delivered",
    "completed",
    "in_progress",
    "ready_for_pickup"
]
# Orders still being processed in the shop
PENDING_LAUNDRY_STATUSES = ["received", "washing", "drying", "folding"]
NOTIFICATION_TYPES = ["booking", "payment", "complaint", "system", "user_message"]
NOTIFICATION_STATUSES = ["unread", "read", "archived"]
REVIEW_STATUSES = ["pending", "approved", "rejected"]

# Service Categories
SERVICE_CATEGORIES = [
    "House Cleaning",
    "Deep Cleaning",
    "Office Cleaning",
    "Carpet Cleaning",
    "Upholstery Cleaning",
    "Laundry",
    "Dry Cleaning",
    "Ironing"
]

CURRENCY = "NGN"
CURRENCY_SYMBOL = "₦"

DASHBOARD_TABS = {
    "overview": "📊 Overview",
    "bookings": "📅 Bookings",
    "users": "👥 Users",
    "contacts": "💬 Messages",
    "payments": "💳 Payments",
    "subscriptions": "🔁 Subscriptions",
    "laundry": "🧺 Laundry",
    "delivery": "🚚 Delivery",
    "notifications": "🔔 Notifications",
    "reviews": "⭐ Reviews",
    "complaints": "⚠️ Complaints",
    "settings": "⚙️ Settings"
}


class ConfigurationError(Exception):
    """Raised when a required setting is missing"""


def get_secret(section: Optional[str], key: str, default: Any = None) -> Any:
    """
    Look up a setting, environment first, then Streamlit secrets.

    Environment variable names are SECTION_KEY in upper case, or just KEY
    for top-level settings.
    """
    env_name = f"{section}_{key}".upper() if section else key.upper()
    if os.environ.get(env_name):
        return os.environ[env_name]

    try:
        if section:
            return st.secrets.get(section, {}).get(key, default)
        return st.secrets.get(key, default)
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml in this environment
        return default


def get_supabase_config() -> Dict[str, str]:
    """Return the Supabase project URL and anon key"""
    url = get_secret("supabase", "url")
    anon_key = get_secret("supabase", "anon_key")
    if not url or not anon_key:
        raise ConfigurationError("Missing Supabase settings: set [supabase] url and anon_key")
    return {"url": url, "anon_key": anon_key}


def is_development() -> bool:
    return get_secret(None, "environment") == "development"


def configure_page():
    """Configure basic Streamlit page settings"""
    st.set_page_config(
        page_title="Cleaning Service Admin",
        page_icon="🧼",
        layout="wide",
        initial_sidebar_state="expanded"
    )

def load_css():
    """Load custom CSS styles"""
    st.markdown("""
        <style>
        /* Hide default Streamlit navigation menu */
        #MainMenu {visibility: hidden;}
        [data-testid="stSidebarNav"] {display: none;}

        .stButton button {
            width: 100%;
        }
        .realtime-live {color: #16a34a; font-weight: 600;}
        .realtime-offline {color: #dc2626; font-weight: 600;}
        </style>
    """, unsafe_allow_html=True)

def initialize_session_state():
    """Initialize all session state variables"""
    defaults: Dict[str, Any] = {
        'page': 'login',
        'admin_authenticated': False,
        'remember_me': False,
        'active_tab': 'overview',
        'booking_search': '',
        'booking_status_filter': 'all',
        'pending_delete': None,
        'initial_load_done': False,
        'preferences': {
            'email_notifications': True,
            'sms_notifications': False,
            'auto_confirm_bookings': False,
            'maintenance_mode': False
        }
    }

    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value
