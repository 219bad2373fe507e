#!/usr/bin/env python3
"""
Row models: construction from backend rows, joins and insert payloads
"""

from models import (
    MODELS_BY_TABLE,
    Booking,
    Payment,
    PickupDelivery,
    LaundryOrder,
    Subscription,
    AdminNotification,
    User,
    strip_display_fields
)
from config.settings import TABLES


def test_every_table_has_a_model():
    assert sorted(MODELS_BY_TABLE) == sorted(TABLES)


def test_from_dict_ignores_unknown_columns_and_stringifies_id():
    user = User.from_dict({'id': 42, 'email': 'ada@example.com', 'full_name': 'Ada Obi', 'role': 'x'})
    assert user.id == '42'
    assert user.first_name == 'Ada'
    assert user.last_name == 'Obi'


def test_from_joined_uses_defaults():
    payment = Payment.from_joined({'id': 'p1', 'amount': 100, 'users': None})
    assert payment.customer_name == 'Unknown'
    assert payment.customer_email == ''
    assert payment.service_name == 'Unknown Service'

    payment = Payment.from_joined({
        'id': 'p1',
        'users': {'full_name': 'Ada', 'email': 'ada@example.com'},
        'bookings': {'service_name': 'Deep Cleaning'}
    })
    assert payment.customer_name == 'Ada'
    assert payment.service_name == 'Deep Cleaning'


def test_to_record_drops_display_and_empty_server_fields():
    record = Booking(service_name='Ironing', user_name='Ada').to_record()
    assert 'user_name' not in record
    assert 'id' not in record
    assert 'created_at' not in record
    assert record['service_name'] == 'Ironing'

    record = AdminNotification(title='Hi').to_record()
    assert 'read_at' in record


def test_strip_display_fields():
    assert strip_display_fields(Booking, {'status': 'completed', 'user_email': 'x'}) == {'status': 'completed'}


def test_pickup_delivery_address_by_type():
    assert PickupDelivery(type='pickup', pickup_address='A', delivery_address='B').address == 'A'
    assert PickupDelivery(type='delivery', pickup_address='A', delivery_address='B').address == 'B'


def test_laundry_items_total():
    order = LaundryOrder(items=[
        {'item_type': 'Shirt', 'quantity': 3, 'price_per_item': 500},
        {'item_type': 'Suit', 'quantity': 1, 'price_per_item': 3000},
    ])
    assert order.items_total == 4500.0


def test_subscription_remaining_services():
    assert Subscription(max_services_per_period=4, used_services_current_period=1).remaining_services == 3
    assert Subscription(max_services_per_period=2, used_services_current_period=5).remaining_services == 0


def test_merged_returns_new_instance():
    booking = Booking(id='b1', status='pending')
    updated = booking.merged({'status': 'completed'})
    assert booking.status == 'pending'
    assert updated.status == 'completed'
