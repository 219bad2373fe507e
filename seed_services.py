#!/usr/bin/env python3
"""
Seed script to add the initial cleaning services.
Run this once against an empty services table.
"""

from database.connection import SupabaseConnection, DatabaseError
from state.store import DataStore

SERVICES = [
    {
        'name': 'Standard House Cleaning',
        'category': 'House Cleaning',
        'description': 'Dusting, vacuuming, mopping and bathroom cleaning for every room',
        'base_price': 15000.00,
        'duration_hours': 3.0
    },
    {
        'name': 'Deep Cleaning',
        'category': 'Deep Cleaning',
        'description': 'Top to bottom clean including appliances, cabinets and grout',
        'base_price': 35000.00,
        'duration_hours': 6.0
    },
    {
        'name': 'Office Cleaning',
        'category': 'Office Cleaning',
        'description': 'Workspace, kitchen and restroom cleaning for small offices',
        'base_price': 25000.00,
        'duration_hours': 4.0
    },
    {
        'name': 'Carpet Cleaning',
        'category': 'Carpet Cleaning',
        'description': 'Hot water extraction for wall to wall carpets',
        'base_price': 12000.00,
        'duration_hours': 2.0
    },
    {
        'name': 'Upholstery Cleaning',
        'category': 'Upholstery Cleaning',
        'description': 'Sofas, chairs and mattresses cleaned and deodorized',
        'base_price': 10000.00,
        'duration_hours': 2.0
    },
    {
        'name': 'Wash & Fold Laundry',
        'category': 'Laundry',
        'description': 'Washed, dried and folded, priced per load',
        'base_price': 5000.00,
        'duration_hours': 24.0
    },
    {
        'name': 'Dry Cleaning',
        'category': 'Dry Cleaning',
        'description': 'Suits, dresses and delicate fabrics',
        'base_price': 3000.00,
        'duration_hours': 48.0
    },
    {
        'name': 'Ironing',
        'category': 'Ironing',
        'description': 'Pressing and ironing, priced per item',
        'base_price': 500.00,
        'duration_hours': 24.0
    }
]

def seed_services(store: DataStore) -> int:
    """Add initial services. Returns the number of services inserted."""
    existing = store.fetch_services(active_only=False)
    if existing:
        print(f"Services table already has {len(existing)} services")
        return 0

    inserted_count = 0
    for service in SERVICES:
        try:
            store.create_service({**service, 'is_active': True})
            inserted_count += 1
            print(f"✅ Added: {service['name']}")
        except DatabaseError as e:
            print(f"❌ Failed to add {service['name']}: {e}")

    print(f"\n🎉 Successfully added {inserted_count} services to the database!")
    return inserted_count

if __name__ == "__main__":
    print("🌱 Seeding services database...")
    seed_services(DataStore(SupabaseConnection.get_instance()))
