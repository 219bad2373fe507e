from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class Payment(Record):
    booking_id: str = ""
    user_id: str = ""
    amount: float = 0.0
    currency: str = "NGN"
    payment_method: str = "card"
    payment_status: str = "pending"
    transaction_id: Optional[str] = None
    payment_date: str = ""
    refund_amount: Optional[float] = None
    refund_date: Optional[str] = None
    refund_reason: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    service_name: Optional[str] = None

    TABLE = "payments"
    SELECT = "*, users!inner(full_name, email), bookings!inner(service_name)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "service_name": ("bookings", "service_name", "Unknown Service"),
    }
