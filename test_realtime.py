#!/usr/bin/env python3
"""
Change-feed normalization, subscription and application to the store
"""

import asyncio
import time
from database.realtime import ChangeFeed, normalize_change
from state.reducer import Action, SET_ROWS
from config.settings import TABLES


def test_normalize_server_payload_shape():
    payload = {
        'data': {
            'type': 'INSERT',
            'table': 'bookings',
            'record': {'id': 'b1', 'status': 'pending'},
            'old_record': None
        },
        'ids': [1]
    }
    event = normalize_change('bookings', payload)
    assert event.table == 'bookings'
    assert event.event_type == 'INSERT'
    assert event.new == {'id': 'b1', 'status': 'pending'}
    assert event.row_id == 'b1'


def test_normalize_flat_payload_shape():
    event = normalize_change('reviews', {'eventType': 'delete', 'new': {}, 'old': {'id': 'r1'}})
    assert event.event_type == 'DELETE'
    assert event.row_id == 'r1'


def test_normalize_ignores_non_row_changes():
    assert normalize_change('bookings', {'data': {'type': 'SYSTEM'}}) is None
    assert normalize_change('bookings', {'status': 'ok'}) is None
    assert normalize_change('bookings', None) is None


def test_apply_insert_update_delete(store, feed):
    feed.push('bookings', {'eventType': 'INSERT', 'new': {'id': 'b1', 'status': 'pending', 'total_amount': 80}})
    feed.push('bookings', {'eventType': 'UPDATE', 'new': {'id': 'b1', 'status': 'completed', 'total_amount': 80}})
    feed.push('contact_messages', {'eventType': 'INSERT', 'new': {'id': 'm1', 'name': 'Chidi'}})

    assert store.sync_realtime(feed) == 3
    assert store.state.bookings[0].status == 'completed'
    assert store.state.stats.total_revenue == 80.0
    assert store.state.contact_messages[0].name == 'Chidi'

    feed.push('bookings', {'eventType': 'DELETE', 'old': {'id': 'b1'}})
    store.sync_realtime(feed)
    assert store.state.bookings == []


def test_insert_event_for_known_row_merges(store, feed):
    store.dispatch(Action(SET_ROWS, [{'id': 'b1', 'user_name': 'Ada Obi', 'status': 'pending'}], table='bookings'))
    feed.push('bookings', {'eventType': 'INSERT', 'new': {'id': 'b1', 'status': 'confirmed'}})
    store.sync_realtime(feed)

    assert len(store.state.bookings) == 1
    assert store.state.bookings[0].status == 'confirmed'
    assert store.state.bookings[0].user_name == 'Ada Obi'


def test_user_update_event_refreshes_current_user(store, connection, feed):
    connection.sign_up('ada@example.com', 'secret', 'Ada')
    store.sign_in('ada@example.com', 'secret')
    user_id = store.state.auth_user['id']
    store.fetch_all_users()

    feed.push('users', {'eventType': 'UPDATE', 'new': {'id': user_id, 'full_name': 'Ada Obi'}})
    store.sync_realtime(feed)
    assert store.state.current_user.full_name == 'Ada Obi'


def test_events_for_unknown_tables_are_ignored(store, feed):
    feed.push('audit_log', {'eventType': 'INSERT', 'new': {'id': 'x'}})
    assert store.sync_realtime(feed) == 1
    assert store.state.bookings == []


def test_sync_tracks_connection_flag(store, feed):
    store.sync_realtime(feed)
    assert store.state.realtime_connected is True

    feed.connected = False
    store.sync_realtime(feed)
    assert store.state.realtime_connected is False


class FakeChannel:
    def __init__(self, name):
        self.name = name
        self.state = "closed"
        self.bindings = []

    def on_postgres_changes(self, event, callback, table="*", schema="public", filter=None):
        self.bindings.append((event, schema, table, callback))
        return self

    async def subscribe(self, callback=None):
        self.state = "joined"
        return self


class FakeAsyncClient:
    def __init__(self):
        self.channels = {}
        self.removed = False

    def channel(self, name):
        self.channels[name] = FakeChannel(name)
        return self.channels[name]

    async def remove_all_channels(self):
        self.removed = True


def test_change_feed_subscribes_one_channel_per_table():
    client = FakeAsyncClient()

    async def factory(url, key):
        return client

    feed = ChangeFeed("https://example.supabase.co", "anon", client_factory=factory)
    assert feed.is_connected() is False

    asyncio.run(feed._subscribe_all())

    assert sorted(client.channels) == sorted(f"{table}_changes" for table in TABLES)
    event, schema, table, _ = client.channels["bookings_changes"].bindings[0]
    assert (event, schema, table) == ("*", "public", "bookings")
    assert feed.is_connected() is True

    client.channels["reviews_changes"].state = "closed"
    assert feed.is_connected() is False


def test_change_feed_callbacks_enqueue_events():
    client = FakeAsyncClient()

    async def factory(url, key):
        return client

    feed = ChangeFeed("https://example.supabase.co", "anon", tables=['bookings'], client_factory=factory)
    asyncio.run(feed._subscribe_all())

    callback = client.channels["bookings_changes"].bindings[0][3]
    callback({'data': {'type': 'UPDATE', 'record': {'id': 'b1'}, 'old_record': {'id': 'b1'}}})
    callback({'data': {'type': 'UNKNOWN'}})

    events = feed.drain()
    assert [(e.table, e.event_type, e.row_id) for e in events] == [('bookings', 'UPDATE', 'b1')]
    assert feed.drain() == []


def test_failed_subscribe_closes_the_loop():
    async def factory(url, key):
        raise ConnectionError("realtime unavailable")

    feed = ChangeFeed("https://example.supabase.co", "anon", client_factory=factory)
    feed.start()
    feed._thread.join(timeout=5)

    assert feed._thread.is_alive() is False
    assert feed._loop.is_closed() is True
    assert feed.last_error == "realtime unavailable"
    feed.stop()


def test_stop_joins_the_thread_and_closes_the_loop():
    client = FakeAsyncClient()

    async def factory(url, key):
        return client

    feed = ChangeFeed("https://example.supabase.co", "anon", tables=['bookings'], client_factory=factory)
    feed.start()
    deadline = time.monotonic() + 5
    while not (feed.is_connected() and feed._loop.is_running()) and time.monotonic() < deadline:
        time.sleep(0.01)
    assert feed.is_connected() is True

    feed.stop()

    assert client.removed is True
    assert feed._thread.is_alive() is False
    assert feed._loop.is_closed() is True
    assert feed.is_connected() is False
