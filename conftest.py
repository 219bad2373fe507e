import uuid
import pytest
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional
from database.connection import DatabaseError
from database.realtime import normalize_change
from state.store import DataStore


class FakeConnection:
    """
    In-memory stand-in for SupabaseConnection.

    Tables are lists of row dicts. Setting fail_on = {'insert'} (or any other
    method name) makes that call raise DatabaseError. on_call, when set, is
    invoked at the start of every backend call.
    """

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.fail_on = set()
        self.on_call = None
        self.calls: List[tuple] = []
        self.session_user: Optional[Dict[str, Any]] = None
        self.users_by_email: Dict[str, Dict[str, Any]] = {}

    def _enter(self, name: str, *args) -> None:
        self.calls.append((name,) + args)
        if self.on_call:
            self.on_call()
        if name in self.fail_on:
            raise DatabaseError(f"{name} failed")

    # Auth

    def sign_up(self, email, password, full_name):
        self._enter('sign_up', email)
        user = {'id': str(uuid.uuid4()), 'email': email, 'user_metadata': {'full_name': full_name}}
        self.users_by_email[email] = {**user, 'password': password}
        self.tables.setdefault('users', []).append({'id': user['id'], 'email': email, 'full_name': full_name})
        return user

    def sign_in(self, email, password):
        self._enter('sign_in', email)
        account = self.users_by_email.get(email)
        if not account or account['password'] != password:
            raise DatabaseError("Invalid login credentials")
        self.session_user = {key: account[key] for key in ('id', 'email', 'user_metadata')}
        return self.session_user

    def sign_out(self):
        self._enter('sign_out')
        self.session_user = None

    def reset_password(self, email, redirect_to=None):
        self._enter('reset_password', email)

    def get_session_user(self):
        self._enter('get_session_user')
        return self.session_user

    # Rows

    def select(self, table, columns="*", filters=None, order_by="created_at", ascending=False):
        self._enter('select', table)
        rows = [dict(row) for row in self.tables.get(table, [])]
        for column, value in (filters or {}).items():
            rows = [row for row in rows if row.get(column) == value]
        if order_by:
            rows.sort(key=lambda row: str(row.get(order_by) or ""), reverse=not ascending)
        return rows

    def select_one(self, table, row_id):
        rows = self.select(table, filters={'id': row_id}, order_by=None)
        return rows[0] if rows else None

    def insert(self, table, row):
        self._enter('insert', table)
        stored = dict(row)
        stored.setdefault('id', str(uuid.uuid4()))
        stored.setdefault('created_at', datetime.now(timezone.utc).isoformat())
        self.tables.setdefault(table, []).append(stored)
        return dict(stored)

    def update(self, table, row_id, updates):
        self._enter('update', table, row_id)
        for row in self.tables.get(table, []):
            if row.get('id') == row_id:
                row.update(updates)
                return dict(row)
        raise DatabaseError(f"No row with id {row_id} in {table}")

    def delete(self, table, row_id):
        self._enter('delete', table, row_id)
        self.tables[table] = [row for row in self.tables.get(table, []) if row.get('id') != row_id]


class FakeChangeFeed:
    """Queue of change events with a settable connection flag"""

    def __init__(self, connected: bool = True):
        self.connected = connected
        self._events = []

    def push(self, table: str, payload: Dict[str, Any]) -> None:
        event = normalize_change(table, payload)
        if event is not None:
            self._events.append(event)

    def drain(self):
        events, self._events = self._events, []
        return events

    def is_connected(self) -> bool:
        return self.connected


TODAY = date(2024, 5, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def store(connection):
    return DataStore(connection)


@pytest.fixture
def feed():
    return FakeChangeFeed()
