from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class Review(Record):
    user_id: str = ""
    booking_id: str = ""
    rating: int = 0  # 1-5 stars
    title: Optional[str] = None
    comment: Optional[str] = None
    service_quality_rating: int = 0
    staff_rating: int = 0
    timeliness_rating: int = 0
    value_rating: int = 0
    would_recommend: bool = False
    status: str = "pending"
    admin_response: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    service_name: Optional[str] = None

    TABLE = "reviews"
    SELECT = "*, users!inner(full_name, email), bookings!inner(service_name)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "service_name": ("bookings", "service_name", "Unknown Service"),
    }
