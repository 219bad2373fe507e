from typing import Optional
from dataclasses import dataclass
from models.record import Record

@dataclass
class User(Record):
    email: str = ""
    full_name: str = ""
    phone: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""

    TABLE = "users"

    @property
    def first_name(self) -> str:
        return self.full_name.split(" ")[0] if self.full_name else ""

    @property
    def last_name(self) -> str:
        parts = self.full_name.split(" ", 1) if self.full_name else []
        return parts[1] if len(parts) > 1 else ""
