"""
Read-only views over AppState used by the dashboard tabs.

Every function that depends on the current date takes it as an argument so
the summaries are deterministic under test.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Dict, Any, Optional
from config.settings import PENDING_LAUNDRY_STATUSES
from models import Booking, ContactMessage, AdminNotification
from state.reducer import AppState
from utils.formatting import parse_timestamp, to_utc_date, utc_today
from utils.null_handling import safe_get_float, safe_sum


@dataclass
class Activity:
    kind: str  # 'booking' or 'message'
    title: str
    subtitle: str
    status: str
    created_at: str


def _sort_key(value: Any) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _newest_first(rows: List[Any]) -> List[Any]:
    return sorted(rows, key=lambda row: _sort_key(row.created_at), reverse=True)


def _same_month(value: Any, today: date) -> bool:
    parsed = to_utc_date(value)
    return parsed is not None and (parsed.year, parsed.month) == (today.year, today.month)


def filter_bookings(bookings: List[Booking], search: str = "", status: str = "all") -> List[Booking]:
    """
    Case-insensitive search over service name, phone and address, combined
    with an exact status filter ('all' matches every status).
    """
    term = (search or "").strip().lower()
    results = []
    for booking in bookings:
        if status and status != "all" and booking.status != status:
            continue
        if term and not any(
            term in str(value or "").lower()
            for value in (booking.service_name, booking.phone, booking.address)
        ):
            continue
        results.append(booking)
    return results


def recent_activities(bookings: List[Booking], messages: List[ContactMessage], limit: int = 8) -> List[Activity]:
    """Last 5 bookings and last 3 contact messages, newest first"""
    activities = [
        Activity(
            kind='booking',
            title=f"New booking: {b.service_name}",
            subtitle=b.user_name or b.phone or "",
            status=b.status,
            created_at=b.created_at
        )
        for b in _newest_first(bookings)[:5]
    ]
    activities += [
        Activity(
            kind='message',
            title=f"Message from {m.name}",
            subtitle=m.email,
            status=m.status,
            created_at=m.created_at
        )
        for m in _newest_first(messages)[:3]
    ]
    activities.sort(key=lambda a: _sort_key(a.created_at), reverse=True)
    return activities[:limit]


def users_with_stats(state: AppState) -> List[Dict[str, Any]]:
    """Each user with bookings count, total spent on completed bookings and activity flag"""
    results = []
    for user in state.users:
        user_bookings = [b for b in state.bookings if b.user_id == user.id]
        total_spent = safe_sum(b.total_amount for b in user_bookings if b.status == 'completed')
        results.append({
            'user': user,
            'bookings_count': len(user_bookings),
            'total_spent': total_spent,
            'is_active': len(user_bookings) > 0
        })
    return results


def delivery_summary(state: AppState, today: Optional[date] = None) -> Dict[str, int]:
    today = today or utc_today()
    rows = state.pickup_deliveries
    return {
        'scheduled_pickups': sum(1 for d in rows if d.type == 'pickup' and d.status == 'scheduled'),
        'in_transit': sum(1 for d in rows if d.status == 'in_transit'),
        'completed_today': sum(
            1 for d in rows
            if d.status == 'completed' and to_utc_date(d.actual_date or d.updated_at) == today
        ),
        'scheduled': sum(1 for d in rows if d.status == 'scheduled')
    }


def complaint_summary(state: AppState, today: Optional[date] = None) -> Dict[str, int]:
    today = today or utc_today()
    rows = state.user_complaints
    return {
        'new': sum(1 for c in rows if c.status == 'new'),
        'investigating': sum(1 for c in rows if c.status == 'investigating'),
        'resolved': sum(1 for c in rows if c.status == 'resolved'),
        'this_month': sum(1 for c in rows if _same_month(c.created_at, today))
    }


def days_until(value: Any, now: datetime) -> Optional[int]:
    """Whole days from now until value, rounded up"""
    target = parse_timestamp(value)
    if target is None:
        return None
    if target.tzinfo is None:
        target = target.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.ceil((target - now).total_seconds() / 86400)


def subscription_summary(state: AppState, now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Counts for the subscriptions tab. A subscription is expiring when its
    next billing date falls within the next 7 days.
    """
    now = now or datetime.now(timezone.utc)
    rows = state.subscriptions
    active = [s for s in rows if s.status == 'active']
    expiring = []
    for s in rows:
        days = days_until(s.next_billing_date, now) if s.next_billing_date else None
        if days is not None and 0 < days <= 7:
            expiring.append(s)
    return {
        'active': len(active),
        'monthly_revenue': safe_sum(s.amount for s in active),
        'expiring_soon': len(expiring),
        'cancelled': sum(1 for s in rows if s.status == 'cancelled')
    }


def laundry_summary(state: AppState, today: Optional[date] = None) -> Dict[str, Any]:
    today = today or utc_today()
    rows = state.laundry_orders
    delivered_today = [
        o for o in rows
        if o.status in ('delivered', 'completed') and to_utc_date(o.updated_at) == today
    ]
    return {
        'total': len(rows),
        'pending': sum(1 for o in rows if o.status in PENDING_LAUNDRY_STATUSES),
        'completed_today': len(delivered_today),
        'revenue_today': safe_sum(o.total_amount for o in delivered_today)
    }


def visible_notifications(notifications: List[AdminNotification]) -> List[AdminNotification]:
    """Non-archived notifications, newest first"""
    return _newest_first([n for n in notifications if n.status != 'archived'])


def notification_summary(state: AppState, today: Optional[date] = None) -> Dict[str, int]:
    today = today or utc_today()
    rows = state.admin_notifications
    return {
        'unread': sum(1 for n in rows if n.status == 'unread'),
        'action_required': sum(1 for n in rows if n.action_required and n.status != 'archived'),
        'today': sum(1 for n in rows if to_utc_date(n.created_at) == today)
    }


def review_summary(state: AppState) -> Dict[str, Any]:
    rows = state.reviews
    return {
        'average': state.stats.average_rating,
        'total': len(rows),
        'pending': sum(1 for r in rows if r.status == 'pending'),
        'positive': sum(1 for r in rows if safe_get_float(r.rating) >= 4)
    }


def payment_summary(state: AppState) -> Dict[str, Any]:
    rows = state.payments
    return {
        'total': len(rows),
        'completed_amount': safe_sum(p.amount for p in rows if p.payment_status == 'completed'),
        'pending': sum(1 for p in rows if p.payment_status == 'pending'),
        'refunded_amount': safe_sum(
            p.refund_amount for p in rows if p.payment_status == 'refunded'
        )
    }
