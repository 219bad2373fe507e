import re
import math
from typing import Union, Optional, Tuple

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

def validate_email(email: str) -> bool:
    """Validate email format"""
    return bool(email) and re.match(EMAIL_PATTERN, email.strip()) is not None

def validate_phone(phone: str) -> Tuple[bool, str]:
    """Validate phone number format (10 to 14 digits, optional leading +)"""
    if not phone:
        return False, ""
    cleaned = ''.join(filter(str.isdigit, phone))
    is_valid = 10 <= len(cleaned) <= 14
    prefix = '+' if phone.strip().startswith('+') else ''
    return is_valid, f"{prefix}{cleaned}" if is_valid else phone

def validate_amount(value: Optional[Union[int, float, str]], default: float = 0.0) -> float:
    """Convert a money amount, rejecting negatives, NaN and infinity"""
    try:
        if value is None:
            return default
        float_value = float(value)
        if math.isnan(float_value) or math.isinf(float_value):
            return default
        return max(0.0, float_value)
    except (ValueError, TypeError):
        return default
