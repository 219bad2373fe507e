from typing import Optional, Dict, Any
from dataclasses import dataclass
from models.record import Record

@dataclass
class Booking(Record):
    user_id: str = ""
    service_type: str = ""
    service_name: str = ""
    date: str = ""
    time: str = ""
    address: str = ""
    phone: str = ""
    special_instructions: Optional[str] = None
    status: str = "pending"
    total_amount: float = 0.0
    created_at: str = ""
    updated_at: str = ""
    # Display fields from the users join
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    user_phone: Optional[str] = None

    TABLE = "bookings"
    SELECT = "*, users!inner(full_name, email, phone)"
    JOINED_FIELDS = {
        "user_name": ("users", "full_name", "Unknown"),
        "user_email": ("users", "email", ""),
        "user_phone": ("users", "phone", None),
    }

    @classmethod
    def from_joined(cls, row: Dict[str, Any]) -> 'Booking':
        booking = super().from_joined(row)
        if not booking.user_phone:
            # Fall back to the phone captured on the booking itself
            booking.user_phone = booking.phone
        return booking
