from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class AdminNotification(Record):
    type: str = "system"
    title: str = ""
    message: str = ""
    priority: str = "medium"
    status: str = "unread"
    related_id: Optional[str] = None  # id of the related booking, payment, etc.
    action_required: bool = False
    created_at: str = ""
    read_at: Optional[str] = None

    TABLE = "admin_notifications"
    SERVER_FIELDS = ("id", "created_at")
