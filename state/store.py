from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List, Iterator
from database.connection import DatabaseError
from database.realtime import ChangeEvent
from models import (
    MODELS_BY_TABLE,
    Record,
    Booking,
    Service,
    ContactMessage,
    PickupDelivery,
    UserComplaint,
    Payment,
    Subscription,
    LaundryOrder,
    AdminNotification,
    Review,
    strip_display_fields
)
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
    LOGOUT
)


class AuthenticationRequired(Exception):
    """Raised when an operation needs a signed-in user"""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _payload(data: Any) -> Dict[str, Any]:
    if isinstance(data, Record):
        return data.to_record()
    return dict(data)


class DataStore:
    """
    Holds the dashboard state and wraps every backend call.

    Each operation sets the loading flag, calls the backend, dispatches the
    resulting row change, and on failure records the error message in state
    before re-raising it. The loading flag is always cleared.
    """

    def __init__(self, connection, state: Optional[AppState] = None, debug: bool = False):
        self.connection = connection
        self.state = state or AppState()
        self.debug = debug

    def dispatch(self, action: Action) -> AppState:
        self.state = reduce(self.state, action)
        return self.state

    def debug_print(self, msg: str) -> None:
        """Helper function for debug logging"""
        if self.debug:
            print(f"DEBUG: {msg}")

    @contextmanager
    def _pending(self, clear_error: bool = False) -> Iterator[None]:
        self.dispatch(Action(SET_LOADING, True))
        if clear_error:
            self.dispatch(Action(SET_ERROR, None))
        try:
            yield
        except Exception as e:
            self.dispatch(Action(SET_ERROR, str(e)))
            raise
        finally:
            self.dispatch(Action(SET_LOADING, False))

    # Generic row helpers

    def _fetch(self, table: str, filters: Optional[Dict[str, Any]] = None,
               order_by: str = "created_at", ascending: bool = False, joined: bool = True) -> List[Record]:
        model = MODELS_BY_TABLE[table]
        with self._pending():
            rows = self.connection.select(
                table,
                columns=model.SELECT if joined else "*",
                filters=filters,
                order_by=order_by,
                ascending=ascending
            )
            records = [model.from_joined(row) if joined else model.from_dict(row) for row in rows]
            self.dispatch(Action(SET_ROWS, records, table=table))
            self.debug_print(f"Fetched {len(records)} rows from {table}")
        return records

    def _create(self, table: str, data: Any) -> Record:
        with self._pending():
            row = self.connection.insert(table, _payload(data))
            record = MODELS_BY_TABLE[table].from_dict(row)
            self.dispatch(Action(ADD_ROW, record, table=table))
        return record

    def _update(self, table: str, row_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        updates = strip_display_fields(MODELS_BY_TABLE[table], updates)
        with self._pending():
            row = self.connection.update(table, row_id, updates)
            self.dispatch(Action(UPDATE_ROW, {'id': row_id, 'updates': row}, table=table))
        return row

    def _delete(self, table: str, row_id: str) -> None:
        with self._pending():
            self.connection.delete(table, row_id)
            self.dispatch(Action(DELETE_ROW, row_id, table=table))

    # Auth

    def _load_profile(self, user_id: str) -> None:
        profile = self.connection.select_one('users', user_id)
        if profile:
            self.dispatch(Action(SET_CURRENT_USER, profile))

    def initialize_auth(self) -> None:
        """Restore an existing auth session and its profile"""
        with self._pending():
            user = self.connection.get_session_user()
            if user:
                self.dispatch(Action(SET_AUTH_USER, user))
                self._load_profile(user['id'])

    def sign_up(self, email: str, password: str, full_name: str) -> None:
        with self._pending(clear_error=True):
            user = self.connection.sign_up(email, password, full_name)
            if user:
                # Profile row is created by a database trigger
                self.dispatch(Action(SET_AUTH_USER, user))

    def sign_in(self, email: str, password: str) -> None:
        with self._pending(clear_error=True):
            user = self.connection.sign_in(email, password)
            if user:
                self.dispatch(Action(SET_AUTH_USER, user))
                self._load_profile(user['id'])

    def sign_out(self) -> None:
        with self._pending():
            self.connection.sign_out()
            self.dispatch(Action(LOGOUT))

    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> None:
        with self._pending(clear_error=True):
            self.connection.reset_password(email, redirect_to)

    # Bookings

    def create_booking(self, booking: Any) -> Booking:
        if not self.state.auth_user:
            raise AuthenticationRequired("User must be authenticated")
        data = {**_payload(booking), 'user_id': self.state.auth_user['id']}
        return self._create('bookings', data)

    def update_booking(self, booking_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('bookings', booking_id, updates)

    def delete_booking(self, booking_id: str) -> None:
        self._delete('bookings', booking_id)

    def fetch_user_bookings(self) -> List[Booking]:
        """Bookings of the signed-in user"""
        if not self.state.auth_user:
            return []
        return self._fetch('bookings', filters={'user_id': self.state.auth_user['id']}, joined=False)

    def fetch_all_bookings(self) -> List[Booking]:
        return self._fetch('bookings')

    # Services

    def fetch_services(self, active_only: bool = True) -> List[Service]:
        filters = {'is_active': True} if active_only else None
        return self._fetch('services', filters=filters, order_by='name', ascending=True)

    def create_service(self, service: Any) -> Service:
        return self._create('services', service)

    def update_service(self, service_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('services', service_id, updates)

    # Contact messages

    def create_contact_message(self, message: Any) -> ContactMessage:
        return self._create('contact_messages', {**_payload(message), 'status': 'new'})

    def fetch_contact_messages(self) -> List[ContactMessage]:
        return self._fetch('contact_messages')

    def update_contact_message(self, message_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('contact_messages', message_id, updates)

    # Users

    def fetch_all_users(self):
        return self._fetch('users')

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('users', user_id, updates)

    def delete_user(self, user_id: str) -> None:
        self._delete('users', user_id)

    # Pickup / delivery

    def fetch_pickup_deliveries(self) -> List[PickupDelivery]:
        return self._fetch('pickup_deliveries')

    def create_pickup_delivery(self, delivery: Any) -> PickupDelivery:
        return self._create('pickup_deliveries', delivery)

    def update_pickup_delivery(self, delivery_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('pickup_deliveries', delivery_id, updates)

    # Complaints

    def fetch_user_complaints(self) -> List[UserComplaint]:
        return self._fetch('user_complaints')

    def create_user_complaint(self, complaint: Any) -> UserComplaint:
        return self._create('user_complaints', complaint)

    def update_user_complaint(self, complaint_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        updates = dict(updates)
        if updates.get('status') == 'resolved' and not updates.get('resolved_at'):
            updates['resolved_at'] = _now_iso()
        return self._update('user_complaints', complaint_id, updates)

    # Payments

    def fetch_payments(self) -> List[Payment]:
        return self._fetch('payments')

    def create_payment(self, payment: Any) -> Payment:
        return self._create('payments', payment)

    def update_payment(self, payment_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('payments', payment_id, updates)

    def refund_payment(self, payment_id: str, amount: float, reason: str = "") -> Dict[str, Any]:
        return self.update_payment(payment_id, {
            'payment_status': 'refunded',
            'refund_amount': amount,
            'refund_date': _now_iso(),
            'refund_reason': reason or None
        })

    # Subscriptions

    def fetch_subscriptions(self) -> List[Subscription]:
        return self._fetch('subscriptions')

    def create_subscription(self, subscription: Any) -> Subscription:
        return self._create('subscriptions', subscription)

    def update_subscription(self, subscription_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('subscriptions', subscription_id, updates)

    # Laundry orders

    def fetch_laundry_orders(self) -> List[LaundryOrder]:
        return self._fetch('laundry_orders')

    def create_laundry_order(self, order: Any) -> LaundryOrder:
        return self._create('laundry_orders', order)

    def update_laundry_order(self, order_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('laundry_orders', order_id, updates)

    # Admin notifications

    def fetch_admin_notifications(self) -> List[AdminNotification]:
        return self._fetch('admin_notifications')

    def create_admin_notification(self, notification: Any) -> AdminNotification:
        return self._create('admin_notifications', notification)

    def update_admin_notification(self, notification_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('admin_notifications', notification_id, updates)

    def mark_notification_as_read(self, notification_id: str) -> Dict[str, Any]:
        return self.update_admin_notification(notification_id, {
            'status': 'read',
            'read_at': _now_iso()
        })

    def archive_notification(self, notification_id: str) -> Dict[str, Any]:
        return self.update_admin_notification(notification_id, {'status': 'archived'})

    # Reviews

    def fetch_reviews(self) -> List[Review]:
        return self._fetch('reviews')

    def update_review(self, review_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._update('reviews', review_id, updates)

    def approve_review(self, review_id: str, admin_response: Optional[str] = None) -> Dict[str, Any]:
        return self.update_review(review_id, {'status': 'approved', 'admin_response': admin_response})

    def reject_review(self, review_id: str, admin_response: Optional[str] = None) -> Dict[str, Any]:
        return self.update_review(review_id, {'status': 'rejected', 'admin_response': admin_response})

    # Dashboard

    def load_dashboard_data(self) -> List[str]:
        """
        Fetch every admin collection. A failing fetch is logged and skipped
        so one broken table does not blank the dashboard.

        Returns:
            List[str]: tables that failed to load
        """
        loaders = {
            'contact_messages': self.fetch_contact_messages,
            'users': self.fetch_all_users,
            'bookings': self.fetch_all_bookings,
            'services': self.fetch_services,
            'pickup_deliveries': self.fetch_pickup_deliveries,
            'user_complaints': self.fetch_user_complaints,
            'payments': self.fetch_payments,
            'subscriptions': self.fetch_subscriptions,
            'laundry_orders': self.fetch_laundry_orders,
            'admin_notifications': self.fetch_admin_notifications,
            'reviews': self.fetch_reviews,
        }
        failed = []
        for table, loader in loaders.items():
            try:
                loader()
            except DatabaseError as e:
                print(f"Error fetching {table}: {str(e)}")
                failed.append(table)
        return failed

    # Realtime

    def apply_change(self, event: ChangeEvent) -> None:
        """Merge one change-feed event into local state"""
        if event.table not in MODELS_BY_TABLE:
            return
        self.debug_print(f"{event.table} change received: {event.event_type}")
        row_id = event.row_id
        if event.event_type == 'INSERT':
            self.dispatch(Action(ADD_ROW, event.new, table=event.table))
        elif event.event_type == 'UPDATE' and row_id:
            self.dispatch(Action(UPDATE_ROW, {'id': row_id, 'updates': event.new}, table=event.table))
        elif event.event_type == 'DELETE' and row_id:
            self.dispatch(Action(DELETE_ROW, row_id, table=event.table))

    def sync_realtime(self, feed) -> int:
        """
        Drain pending change events into state and refresh the connection
        flag. Returns the number of events applied.
        """
        events = feed.drain()
        for event in events:
            self.apply_change(event)
        connected = feed.is_connected()
        if connected != self.state.realtime_connected:
            self.dispatch(Action(SET_REALTIME_CONNECTED, connected))
        return len(events)
