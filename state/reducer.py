"""
Local mirror of the backend tables.

reduce() is a pure function of (state, action): row actions name the table
they touch, so one merge path serves every mirrored entity. Statistics are
recomputed from the full collections after every table mutation.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional
from config.settings import PENDING_LAUNDRY_STATUSES
from models import (
    MODELS_BY_TABLE,
    Record,
    User,
    Booking,
    Service,
    ContactMessage,
    PickupDelivery,
    UserComplaint,
    Payment,
    Subscription,
    LaundryOrder,
    AdminNotification,
    Review
)
from utils.formatting import utc_today, to_utc_date
from utils.null_handling import safe_get_float, safe_sum

# Action types
SET_LOADING = "SET_LOADING"
SET_ERROR = "SET_ERROR"
SET_AUTH_USER = "SET_AUTH_USER"
SET_CURRENT_USER = "SET_CURRENT_USER"
SET_ROWS = "SET_ROWS"
ADD_ROW = "ADD_ROW"
UPDATE_ROW = "UPDATE_ROW"
DELETE_ROW = "DELETE_ROW"
SET_REALTIME_CONNECTED = "SET_REALTIME_CONNECTED"
LOGIN = "LOGIN"
LOGOUT = "LOGOUT"
UPDATE_STATS = "UPDATE_STATS"

ROW_ACTIONS = (SET_ROWS, ADD_ROW, UPDATE_ROW, DELETE_ROW)


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None
    table: Optional[str] = None


@dataclass
class Stats:
    total_bookings: int = 0
    total_revenue: float = 0.0
    active_users: int = 0
    pending_bookings: int = 0
    completed_bookings: int = 0
    today_bookings: int = 0
    monthly_revenue: float = 0.0
    average_order_value: float = 0.0
    total_payments: int = 0
    pending_payments: int = 0
    active_subscriptions: int = 0
    pending_orders: int = 0
    unread_notifications: int = 0
    average_rating: float = 0.0
    pending_reviews: int = 0


@dataclass
class AppState:
    users: List[User] = field(default_factory=list)
    bookings: List[Booking] = field(default_factory=list)
    services: List[Service] = field(default_factory=list)
    contact_messages: List[ContactMessage] = field(default_factory=list)
    pickup_deliveries: List[PickupDelivery] = field(default_factory=list)
    user_complaints: List[UserComplaint] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)
    subscriptions: List[Subscription] = field(default_factory=list)
    laundry_orders: List[LaundryOrder] = field(default_factory=list)
    admin_notifications: List[AdminNotification] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)
    current_user: Optional[User] = None
    auth_user: Optional[Dict[str, Any]] = None
    is_authenticated: bool = False
    loading: bool = False
    error: Optional[str] = None
    realtime_connected: bool = False
    stats: Stats = field(default_factory=Stats)

    def rows(self, table: str) -> List[Record]:
        return getattr(self, _collection(table))


def _collection(table: Optional[str]) -> str:
    if table not in MODELS_BY_TABLE:
        raise ValueError(f"Unknown table: {table}")
    return table


def _as_model(table: str, row: Any) -> Record:
    return MODELS_BY_TABLE[table].from_dict(row)


def round_half_up(value: float, places: int = 1) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_stats(state: AppState, today: Optional[date] = None) -> Stats:
    """Recompute every derived statistic by scanning the collections"""
    today = today or utc_today()
    bookings = state.bookings
    completed = [b for b in bookings if b.status == 'completed']

    total_revenue = safe_sum(b.total_amount for b in completed)
    monthly_revenue = safe_sum(
        b.total_amount for b in completed
        if (to_utc_date(b.date) or date.min).strftime('%Y-%m') == today.strftime('%Y-%m')
    )
    ratings = [safe_get_float(r.rating) for r in state.reviews]
    average_rating = sum(ratings) / len(ratings) if ratings else 0.0

    return Stats(
        total_bookings=len(bookings),
        total_revenue=total_revenue,
        active_users=len(state.users),
        pending_bookings=sum(1 for b in bookings if b.status == 'pending'),
        completed_bookings=len(completed),
        today_bookings=sum(1 for b in bookings if to_utc_date(b.date) == today),
        monthly_revenue=monthly_revenue,
        average_order_value=total_revenue / len(bookings) if bookings else 0.0,
        total_payments=len(state.payments),
        pending_payments=sum(1 for p in state.payments if p.payment_status == 'pending'),
        active_subscriptions=sum(1 for s in state.subscriptions if s.status == 'active'),
        pending_orders=sum(1 for o in state.laundry_orders if o.status in PENDING_LAUNDRY_STATUSES),
        unread_notifications=sum(1 for n in state.admin_notifications if n.status == 'unread'),
        average_rating=round_half_up(average_rating, 1),
        pending_reviews=sum(1 for r in state.reviews if r.status == 'pending')
    )


def _reduce_rows(state: AppState, action: Action) -> AppState:
    table = _collection(action.table)
    rows = getattr(state, table)
    changes: Dict[str, Any] = {}

    if action.type == SET_ROWS:
        rows = [_as_model(table, row) for row in (action.payload or [])]

    elif action.type == ADD_ROW:
        incoming = _as_model(table, action.payload)
        if any(row.id == incoming.id for row in rows):
            # Only the columns actually received, so display fields survive
            received = action.payload.to_dict() if isinstance(action.payload, Record) else dict(action.payload)
            rows = [row.merged(received) if row.id == incoming.id else row for row in rows]
        else:
            rows = rows + [incoming]

    elif action.type == UPDATE_ROW:
        row_id = str(action.payload['id'])
        updates = action.payload.get('updates') or {}
        rows = [row.merged(updates) if row.id == row_id else row for row in rows]
        if table == 'users' and state.current_user and state.current_user.id == row_id:
            changes['current_user'] = state.current_user.merged(updates)

    elif action.type == DELETE_ROW:
        row_id = str(action.payload)
        rows = [row for row in rows if row.id != row_id]

    changes[table] = rows
    return replace(state, **changes)


def reduce(state: AppState, action: Action, today: Optional[date] = None) -> AppState:
    """Return the state that results from applying action to state"""
    if action.type == SET_LOADING:
        return replace(state, loading=bool(action.payload))

    if action.type == SET_ERROR:
        return replace(state, error=action.payload)

    if action.type == SET_AUTH_USER:
        return replace(state, auth_user=action.payload, is_authenticated=bool(action.payload))

    if action.type == SET_CURRENT_USER:
        user = User.from_dict(action.payload) if action.payload else None
        return replace(state, current_user=user)

    if action.type in ROW_ACTIONS:
        new_state = _reduce_rows(state, action)
        return replace(new_state, stats=compute_stats(new_state, today))

    if action.type == SET_REALTIME_CONNECTED:
        return replace(state, realtime_connected=bool(action.payload))

    if action.type == LOGIN:
        user = action.payload.get('user')
        return replace(
            state,
            auth_user=action.payload.get('auth_user'),
            current_user=User.from_dict(user) if user else None,
            is_authenticated=True
        )

    if action.type == LOGOUT:
        return replace(state, auth_user=None, current_user=None, is_authenticated=False)

    if action.type == UPDATE_STATS:
        return replace(state, stats=compute_stats(state, today))

    return state
