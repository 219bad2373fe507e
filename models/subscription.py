from typing import Optional, List
from dataclasses import dataclass, field
from models.record import Record

@dataclass
class Subscription(Record):
    user_id: str = ""
    plan_name: str = ""
    plan_type: str = "monthly"
    billing_cycle: str = "monthly"
    status: str = "active"
    start_date: str = ""
    end_date: Optional[str] = None
    next_billing_date: str = ""
    amount: float = 0.0
    services_included: List[str] = field(default_factory=list)
    max_services_per_period: int = 0
    used_services_current_period: int = 0
    auto_renewal: bool = True
    created_at: str = ""
    updated_at: str = ""
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None

    TABLE = "subscriptions"
    SELECT = "*, users!inner(full_name, email, phone)"
    JOINED_FIELDS = {
        "customer_name": ("users", "full_name", "Unknown"),
        "customer_email": ("users", "email", ""),
        "customer_phone": ("users", "phone", ""),
    }

    @property
    def remaining_services(self) -> int:
        return max(self.max_services_per_period - self.used_services_current_period, 0)
