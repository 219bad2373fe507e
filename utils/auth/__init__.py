from utils.auth.middleware import (
    is_admin_authenticated,
    start_admin_session,
    require_admin,
    check_session_timeout,
    clear_admin_session
)
from .auth_utils import check_admin_credentials, hash_password, verify_password

__all__ = [
    'is_admin_authenticated',
    'start_admin_session',
    'require_admin',
    'check_session_timeout',
    'clear_admin_session',
    'check_admin_credentials',
    'hash_password',
    'verify_password'
]
