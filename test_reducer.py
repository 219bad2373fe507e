#!/usr/bin/env python3
"""
Reducer merge semantics for row actions
"""

import pytest
from models import Booking, User, ContactMessage
from state.reducer import (
    Action,
    AppState,
    reduce,
    SET_LOADING,
    SET_ERROR,
    SET_AUTH_USER,
    SET_CURRENT_USER,
    SET_ROWS,
    ADD_ROW,
    UPDATE_ROW,
    DELETE_ROW,
    SET_REALTIME_CONNECTED,
    LOGIN,
    LOGOUT
)


def booking(id, **kwargs):
    data = {'id': id, 'service_name': 'Deep Cleaning', 'status': 'pending', 'total_amount': 100.0}
    data.update(kwargs)
    return data


def test_set_rows_replaces_collection():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1'), booking('2')], table='bookings'))
    assert [b.id for b in state.bookings] == ['1', '2']
    assert all(isinstance(b, Booking) for b in state.bookings)

    state = reduce(state, Action(SET_ROWS, [booking('3')], table='bookings'))
    assert [b.id for b in state.bookings] == ['3']


def test_add_row_appends_new_id():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1')], table='bookings'))
    state = reduce(state, Action(ADD_ROW, booking('2'), table='bookings'))
    assert [b.id for b in state.bookings] == ['1', '2']


def test_add_row_with_existing_id_merges_instead_of_duplicating():
    rows = [booking('1', user_name='Ada Obi')]
    state = reduce(AppState(), Action(SET_ROWS, rows, table='bookings'))
    state = reduce(state, Action(ADD_ROW, {'id': '1', 'status': 'confirmed'}, table='bookings'))

    assert len(state.bookings) == 1
    assert state.bookings[0].status == 'confirmed'
    # display field from the join is kept
    assert state.bookings[0].user_name == 'Ada Obi'


def test_update_row_merges_partial_fields():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1'), booking('2')], table='bookings'))
    state = reduce(state, Action(UPDATE_ROW, {'id': '2', 'updates': {'status': 'completed'}}, table='bookings'))

    assert state.bookings[0].status == 'pending'
    assert state.bookings[1].status == 'completed'
    assert state.bookings[1].service_name == 'Deep Cleaning'


def test_update_row_for_unknown_id_is_noop():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1')], table='bookings'))
    updated = reduce(state, Action(UPDATE_ROW, {'id': '99', 'updates': {'status': 'completed'}}, table='bookings'))
    assert updated.bookings == state.bookings


def test_update_user_refreshes_current_user():
    user = {'id': 'u1', 'email': 'ada@example.com', 'full_name': 'Ada'}
    state = reduce(AppState(), Action(SET_ROWS, [user], table='users'))
    state = reduce(state, Action(SET_CURRENT_USER, user))
    state = reduce(state, Action(UPDATE_ROW, {'id': 'u1', 'updates': {'full_name': 'Ada Obi'}}, table='users'))

    assert state.users[0].full_name == 'Ada Obi'
    assert state.current_user.full_name == 'Ada Obi'


def test_update_other_user_leaves_current_user():
    state = reduce(AppState(), Action(SET_ROWS, [{'id': 'u1'}, {'id': 'u2'}], table='users'))
    state = reduce(state, Action(SET_CURRENT_USER, {'id': 'u1', 'full_name': 'Ada'}))
    state = reduce(state, Action(UPDATE_ROW, {'id': 'u2', 'updates': {'full_name': 'Bola'}}, table='users'))
    assert state.current_user.full_name == 'Ada'


def test_delete_row_removes_id():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1'), booking('2')], table='bookings'))
    state = reduce(state, Action(DELETE_ROW, '1', table='bookings'))
    assert [b.id for b in state.bookings] == ['2']


def test_delete_missing_id_is_noop():
    state = reduce(AppState(), Action(SET_ROWS, [booking('1')], table='bookings'))
    state = reduce(state, Action(DELETE_ROW, '5', table='bookings'))
    assert [b.id for b in state.bookings] == ['1']


def test_row_actions_apply_to_every_table():
    state = reduce(AppState(), Action(ADD_ROW, {'id': 'm1', 'name': 'Chidi'}, table='contact_messages'))
    state = reduce(state, Action(UPDATE_ROW, {'id': 'm1', 'updates': {'status': 'read'}}, table='contact_messages'))
    assert isinstance(state.contact_messages[0], ContactMessage)
    assert state.contact_messages[0].status == 'read'

    state = reduce(state, Action(ADD_ROW, {'id': 'r1', 'rating': 5}, table='reviews'))
    state = reduce(state, Action(DELETE_ROW, 'r1', table='reviews'))
    assert state.reviews == []


def test_unknown_table_raises():
    with pytest.raises(ValueError):
        reduce(AppState(), Action(ADD_ROW, {'id': '1'}, table='invoices'))


def test_row_action_recomputes_stats():
    state = reduce(AppState(), Action(ADD_ROW, booking('1', status='completed', total_amount=250.0), table='bookings'))
    assert state.stats.total_bookings == 1
    assert state.stats.total_revenue == 250.0
    state = reduce(state, Action(DELETE_ROW, '1', table='bookings'))
    assert state.stats.total_bookings == 0
    assert state.stats.total_revenue == 0.0


def test_reduce_does_not_mutate_previous_state():
    before = reduce(AppState(), Action(SET_ROWS, [booking('1')], table='bookings'))
    after = reduce(before, Action(UPDATE_ROW, {'id': '1', 'updates': {'status': 'completed'}}, table='bookings'))
    assert before.bookings[0].status == 'pending'
    assert after.bookings[0].status == 'completed'


def test_flag_actions():
    state = reduce(AppState(), Action(SET_LOADING, True))
    assert state.loading is True
    state = reduce(state, Action(SET_ERROR, "boom"))
    assert state.error == "boom"
    state = reduce(state, Action(SET_REALTIME_CONNECTED, True))
    assert state.realtime_connected is True


def test_auth_actions():
    auth_user = {'id': 'u1', 'email': 'ada@example.com'}
    state = reduce(AppState(), Action(SET_AUTH_USER, auth_user))
    assert state.is_authenticated is True

    state = reduce(AppState(), Action(LOGIN, {'auth_user': auth_user, 'user': {'id': 'u1', 'full_name': 'Ada'}}))
    assert state.is_authenticated is True
    assert isinstance(state.current_user, User)

    state = reduce(state, Action(LOGOUT))
    assert state.auth_user is None
    assert state.current_user is None
    assert state.is_authenticated is False


def test_unknown_action_returns_same_state():
    state = AppState()
    assert reduce(state, Action("SOMETHING_ELSE")) is state
