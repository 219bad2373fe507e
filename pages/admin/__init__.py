# pages/admin/__init__.py
from .overview import overview_tab
from .bookings import bookings_tab
from .users import users_tab
from .contacts import contacts_tab
from .payments import payments_tab
from .subscriptions import subscriptions_tab
from .laundry import laundry_tab
from .delivery import delivery_tab
from .notifications import notifications_tab
from .reviews import reviews_tab
from .complaints import complaints_tab

__all__ = [
    'overview_tab',
    'bookings_tab',
    'users_tab',
    'contacts_tab',
    'payments_tab',
    'subscriptions_tab',
    'laundry_tab',
    'delivery_tab',
    'notifications_tab',
    'reviews_tab',
    'complaints_tab'
]
