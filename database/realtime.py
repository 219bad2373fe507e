import asyncio
import queue
import threading
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Callable
from supabase import acreate_client
from config.settings import TABLES, REALTIME_SCHEMA

EVENT_TYPES = ("INSERT", "UPDATE", "DELETE")


@dataclass
class ChangeEvent:
    table: str
    event_type: str
    new: Dict[str, Any] = field(default_factory=dict)
    old: Dict[str, Any] = field(default_factory=dict)

    @property
    def row_id(self) -> Optional[str]:
        source = self.old if self.event_type == "DELETE" else self.new
        return source.get('id') or self.new.get('id') or self.old.get('id')


def normalize_change(table: str, payload: Dict[str, Any]) -> Optional[ChangeEvent]:
    """
    Turn a postgres_changes payload into a ChangeEvent.

    Accepts the realtime server shape ({'data': {'type', 'record',
    'old_record'}}) as well as the flattened client shape ({'eventType',
    'new', 'old'}). Returns None for anything that is not a row change.
    """
    if not isinstance(payload, dict):
        return None

    data = payload.get('data', payload)
    if not isinstance(data, dict):
        return None

    event_type = data.get('type') or data.get('eventType') or data.get('event_type')
    if event_type is None:
        return None
    event_type = str(getattr(event_type, 'value', event_type)).upper()
    if event_type not in EVENT_TYPES:
        return None

    new = data.get('record') or data.get('new') or {}
    old = data.get('old_record') or data.get('old') or {}
    return ChangeEvent(
        table=data.get('table') or table,
        event_type=event_type,
        new=dict(new),
        old=dict(old)
    )


def _channel_joined(channel: Any) -> bool:
    state = getattr(channel, 'state', None)
    return str(getattr(state, 'value', state)).lower() == "joined"


class ChangeFeed:
    """
    Subscribes to postgres_changes on every mirrored table.

    The async realtime client runs on its own event loop in a daemon thread.
    Callbacks only enqueue normalized events; the Streamlit script thread
    drains them with drain() and applies them to the store.
    """

    def __init__(self, url: str, key: str, tables: Optional[List[str]] = None,
                 client_factory: Callable = acreate_client):
        self.url = url
        self.key = key
        self.tables = list(tables or TABLES)
        self._client_factory = client_factory
        self._events: "queue.Queue[ChangeEvent]" = queue.Queue()
        self._channels: Dict[str, Any] = {}
        self._client = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self.last_error: Optional[str] = None

    def start(self) -> None:
        """Start the listener thread"""
        if self._thread and self._thread.is_alive():
            return
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name="change-feed", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_until_complete(self._subscribe_all())
            self._loop.run_forever()
        except Exception as e:
            self.last_error = str(e)
            print(f"Error subscribing to change feeds: {str(e)}")
        finally:
            self._loop.close()

    async def _subscribe_all(self) -> None:
        self._client = await self._client_factory(self.url, self.key)
        for table in self.tables:
            channel = self._client.channel(f"{table}_changes")
            channel.on_postgres_changes(
                "*",
                schema=REALTIME_SCHEMA,
                table=table,
                callback=self._make_handler(table)
            )
            await channel.subscribe()
            self._channels[table] = channel

    def _make_handler(self, table: str) -> Callable[[Dict[str, Any]], None]:
        def handler(payload: Dict[str, Any]) -> None:
            event = normalize_change(table, payload)
            if event is not None:
                self._events.put(event)
        return handler

    def drain(self) -> List[ChangeEvent]:
        """Return every event received since the last drain, oldest first"""
        events = []
        while True:
            try:
                events.append(self._events.get_nowait())
            except queue.Empty:
                return events

    def is_connected(self) -> bool:
        """True when every table channel is joined"""
        if len(self._channels) != len(self.tables):
            return False
        return all(_channel_joined(channel) for channel in self._channels.values())

    def stop(self) -> None:
        """Remove all channels and stop the listener loop"""
        loop = self._loop
        if loop is None or not loop.is_running():
            return
        if self._client is not None:
            future = asyncio.run_coroutine_threadsafe(self._client.remove_all_channels(), loop)
            try:
                future.result(timeout=5)
            except Exception as e:
                print(f"Error removing realtime channels: {str(e)}")
        loop.call_soon_threadsafe(loop.stop)
        if self._thread is not None:
            self._thread.join(timeout=5)
        self._channels = {}


__all__ = ['ChangeFeed', 'ChangeEvent', 'normalize_change']
