from .record import Record, strip_display_fields
from .user import User
from .booking import Booking
from .service import Service
from .contact_message import ContactMessage
from .pickup_delivery import PickupDelivery
from .complaint import UserComplaint
from .payment import Payment
from .subscription import Subscription
from .laundry_order import LaundryOrder
from .notification import AdminNotification
from .review import Review

# Table name -> model mirrored into local state
MODELS_BY_TABLE = {
    model.TABLE: model
    for model in (
        User,
        Booking,
        Service,
        ContactMessage,
        PickupDelivery,
        UserComplaint,
        Payment,
        Subscription,
        LaundryOrder,
        AdminNotification,
        Review,
    )
}

__all__ = [
    # Models
    'Record',
    'User',
    'Booking',
    'Service',
    'ContactMessage',
    'PickupDelivery',
    'UserComplaint',
    'Payment',
    'Subscription',
    'LaundryOrder',
    'AdminNotification',
    'Review',

    # Helpers
    'MODELS_BY_TABLE',
    'strip_display_fields'
]
