# utils/__init__.py

from .validation import validate_email, validate_phone, validate_amount
from .formatting import format_currency, format_date, format_datetime, format_status
from .export import bookings_to_csv

__all__ = [
    'validate_email',
    'validate_phone',
    'validate_amount',
    'format_currency',
    'format_date',
    'format_datetime',
    'format_status',
    'bookings_to_csv'
]
