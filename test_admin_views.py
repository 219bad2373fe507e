#!/usr/bin/env python3
"""
Admin tab helpers: payments table rows and action messages across reruns
"""

import pytest
from database.connection import DatabaseError
from models import Payment
from pages.admin import common
from pages.admin.payments import payments_frame


class RerunRequested(Exception):
    pass


class FakeStreamlit:
    """Records messages; rerun stops the script like the real one"""

    def __init__(self):
        self.session_state = {}
        self.successes = []
        self.errors = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)

    def exception(self, e):
        pass

    def rerun(self):
        raise RerunRequested()


@pytest.fixture
def fake_st(monkeypatch):
    fake = FakeStreamlit()
    monkeypatch.setattr(common, "st", fake)
    return fake


def test_payments_frame_fills_missing_join_fields():
    frame = payments_frame([
        Payment(id='p1', amount=5000, customer_name=None, service_name=None),
        Payment(id='p2', amount=100, customer_name='Ada', service_name='Ironing'),
    ])
    assert list(frame['Customer']) == ['Unknown', 'Ada']
    assert list(frame['Service']) == ['Unknown Service', 'Ironing']


def test_success_message_survives_the_rerun(fake_st):
    with pytest.raises(RerunRequested):
        common.run_action(lambda: None, "Booking deleted")
    assert fake_st.successes == []

    common.show_flash()
    assert fake_st.successes == ["Booking deleted"]

    common.show_flash()
    assert fake_st.successes == ["Booking deleted"]


def test_success_without_rerun_is_shown_immediately(fake_st):
    assert common.run_action(lambda: None, "Saved", rerun=False) is True
    assert fake_st.successes == ["Saved"]
    assert 'flash_message' not in fake_st.session_state


def test_failed_action_reports_error_and_skips_rerun(fake_st):
    def fail():
        raise DatabaseError("permission denied")

    assert common.run_action(fail, "Booking deleted") is False
    assert fake_st.errors == ["Error: permission denied"]
    assert 'flash_message' not in fake_st.session_state
