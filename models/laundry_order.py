from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field
from models.record import Record

@dataclass
class LaundryOrder(Record):
    user_id: str = ""
    booking_id: Optional[str] = None
    order_number: str = ""
    order_type: str = "wash_fold"
    service_type: str = "wash_fold"
    # Each item: item_type, quantity, price_per_item, special_instructions
    items: List[Dict[str, Any]] = field(default_factory=list)
    item_count: int = 0
    pickup_date: str = ""
    delivery_date: str = ""
    status: str = "received"
    total_amount: float = 0.0
    special_instructions: Optional[str] = None
    quality_notes: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None

    TABLE = "laundry_orders"
    SELECT = "*, users!inner(full_name, email, phone)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "customer_phone": ("users", "phone", ""),
    }

    @property
    def items_total(self) -> float:
        return sum(
            float(item.get('quantity', 0) or 0) * float(item.get('price_per_item', 0) or 0)
            for item in self.items
        )
