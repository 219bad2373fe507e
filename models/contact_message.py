from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class ContactMessage(Record):
    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    message: str = ""
    status: str = "new"
    created_at: str = ""
    updated_at: str = ""

    TABLE = "contact_messages"
