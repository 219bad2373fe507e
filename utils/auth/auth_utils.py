from passlib.hash import pbkdf2_sha256
from functools import lru_cache
from typing import Optional
from config.settings import ADMIN_EMAIL, ADMIN_DEMO_PASSWORD, get_secret

def hash_password(password: str) -> str:
    """Hash password using PBKDF2-SHA256"""
    return pbkdf2_sha256.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    """Verify password against hash"""
    try:
        return pbkdf2_sha256.verify(password, password_hash)
    except (ValueError, TypeError):
        # Malformed hash
        return False

@lru_cache(maxsize=1)
def _demo_password_hash() -> str:
    return hash_password(ADMIN_DEMO_PASSWORD)

def admin_password_hash() -> str:
    """Configured admin password hash, or the demo password hash"""
    return get_secret("admin", "password_hash") or _demo_password_hash()

def check_admin_credentials(email: str, password: str, password_hash: Optional[str] = None) -> bool:
    """
    Check the admin login. Only ADMIN_EMAIL is accepted; the password is
    verified against password_hash or the configured admin hash.
    """
    if not email or not password:
        return False
    if email != ADMIN_EMAIL:
        return False
    return verify_password(password, password_hash or admin_password_hash())
