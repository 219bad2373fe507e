from datetime import datetime, date, timezone
from typing import Union, Optional
from config.settings import CURRENCY_SYMBOL
from utils.null_handling import safe_get_float

DateLike = Union[str, date, datetime, None]

def format_currency(amount: float) -> str:
    """Format amount as Naira currency"""
    value = safe_get_float(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"

def parse_timestamp(value: DateLike) -> Optional[datetime]:
    """
    Parse an ISO date or timestamp as returned by the backend.

    Accepts 'YYYY-MM-DD', full ISO timestamps with or without offset and a
    trailing 'Z'. Returns None for empty or unparseable values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value).strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None

def to_utc_date(value: DateLike) -> Optional[date]:
    """Calendar date of a backend value, timestamps converted to UTC"""
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()

def utc_today() -> date:
    return datetime.now(timezone.utc).date()

def format_date(value: DateLike) -> str:
    """Format date for display, e.g. 'May 1, 2024'"""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else ""
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"

def format_datetime(value: DateLike) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value) if value else ""
    return f"{format_date(parsed)}, {parsed.strftime('%I:%M %p')}"

def format_status(status: Optional[str]) -> str:
    """'in_progress' -> 'In Progress'"""
    if not status:
        return ""
    return status.replace('_', ' ').replace('-', ' ').title()
