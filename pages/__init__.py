# pages/__init__.py
"""
Initialize pages module and expose page functions
"""

from .auth.admin_login import admin_login_page
from .dashboard import dashboard_page

__all__ = [
    'admin_login_page',
    'dashboard_page',
]
