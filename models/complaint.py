from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class UserComplaint(Record):
    user_id: str = ""
    booking_id: Optional[str] = None
    complaint_type: str = "other"
    subject: str = ""
    description: str = ""
    priority: str = "medium"
    status: str = "new"
    resolution_notes: Optional[str] = None
    assigned_to: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    resolved_at: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None

    TABLE = "user_complaints"
    SELECT = "*, users!inner(full_name, email, phone)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "customer_phone": ("users", "phone", ""),
    }
