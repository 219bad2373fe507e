from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class PickupDelivery(Record):
    booking_id: str = ""
    user_id: str = ""
    type: str = "pickup"
    status: str = "scheduled"
    pickup_address: Optional[str] = None
    delivery_address: Optional[str] = None
    scheduled_date: str = ""
    scheduled_time: str = ""
    actual_date: Optional[str] = None
    actual_time: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    tracking_notes: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    service_name: Optional[str] = None

    TABLE = "pickup_deliveries"
    SELECT = "*, users!inner(full_name, email, phone), bookings!inner(service_name)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "customer_phone": ("users", "phone", ""),
        "service_name": ("bookings", "service_name", "Unknown Service"),
    }

    @property
    def address(self) -> Optional[str]:
        return self.pickup_address if self.type == "pickup" else self.delivery_address
