from dataclasses import dataclass
from models.record import Record

@dataclass
class Service(Record):
    name: str = ""
    description: str = ""
    base_price: float = 0.0
    category: str = ""
    duration_hours: float = 1.0
    is_active: bool = True
    created_at: str = ""
    updated_at: str = ""

    TABLE = "services"
