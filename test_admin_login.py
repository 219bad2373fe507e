#!/usr/bin/env python3
"""
Admin credential check and session timeout
"""

import pytest
from datetime import datetime, timedelta
from utils.auth.auth_utils import check_admin_credentials, hash_password, verify_password
from utils.auth.middleware import session_expired


@pytest.fixture(autouse=True)
def no_configured_hash(monkeypatch):
    monkeypatch.delenv("ADMIN_PASSWORD_HASH", raising=False)


def test_demo_credentials_accepted():
    assert check_admin_credentials("admin@cleaningservice.com", "admin123") is True


def test_email_must_match_exactly():
    assert check_admin_credentials("  ADMIN@CleaningService.com ", "admin123") is False
    assert check_admin_credentials("Admin@cleaningservice.com", "admin123") is False
    assert check_admin_credentials("admin@cleaningservice.com ", "admin123") is False


def test_wrong_password_rejected():
    assert check_admin_credentials("admin@cleaningservice.com", "admin124") is False


def test_other_email_rejected():
    assert check_admin_credentials("someone@cleaningservice.com", "admin123") is False


def test_empty_credentials_rejected():
    assert check_admin_credentials("", "") is False
    assert check_admin_credentials("admin@cleaningservice.com", "") is False


def test_configured_hash_replaces_demo_password(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", hash_password("n3w-secret"))
    assert check_admin_credentials("admin@cleaningservice.com", "n3w-secret") is True
    assert check_admin_credentials("admin@cleaningservice.com", "admin123") is False


def test_verify_password_with_malformed_hash():
    assert verify_password("admin123", "not-a-hash") is False


def test_session_expires_after_thirty_idle_minutes():
    now = datetime(2024, 5, 15, 12, 0)
    recent = (now - timedelta(minutes=29)).timestamp()
    stale = (now - timedelta(minutes=31)).timestamp()

    assert session_expired(recent, remember_me=False, now=now) is False
    assert session_expired(stale, remember_me=False, now=now) is True


def test_remember_me_disables_timeout():
    now = datetime(2024, 5, 15, 12, 0)
    stale = (now - timedelta(hours=5)).timestamp()
    assert session_expired(stale, remember_me=True, now=now) is False


def test_no_activity_recorded_is_not_expired():
    assert session_expired(None, remember_me=False) is False
