"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Oct 08 2025
# SPDX-License-Identifier: MIT
"""

import logging
from datetime import date

from donationhub.db.storage import (
    DONATIONS_KEY,
    PICKUP_LOCATIONS_KEY,
    USERS_KEY,
    KeyValueStore,
    load_collection,
    save_collection,
)
from donationhub.schemas import schemas
from donationhub.utils import clock

logger = logging.getLogger(__name__)


def _sample_records():
    now = clock.utcnow()
    user = schemas.User(
        id="sample-user-1",
        name="John Volunteer",
        email="volunteer@example.com",
        phone="555-123-4567",
        address="456 Volunteer St",
        city="Anytown",
        zip_code="12345",
        password="password123",
        registered_at=now,
        achievements=schemas.Achievements(total_pickups=45, total_distributions=40),
    )
    locations = [
        schemas.PickupLocation(
            id="loc-1",
            name="Downtown Distribution Center",
            address="123 Main St",
            city="Anytown",
            zip_code="12345",
            contact_person="Jane Manager",
            contact_phone="555-111-2222",
        ),
        schemas.PickupLocation(
            id="loc-2",
            name="Westside Donation Hub",
            address="456 Oak Ave",
            city="Anytown",
            zip_code="12346",
            contact_person="Bob Director",
            contact_phone="555-333-4444",
        ),
    ]
    donations = [
        schemas.DonationItem(
            id="don-1",
            reference_number="DN-ABC123XYZ",
            donor_id="donor-1",
            donor_name="Sarah Donor",
            donor_email="sarah@example.com",
            donor_phone="555-555-5555",
            address="789 Pine St",
            city="Anytown",
            zip_code="12345",
            item_title="Children's Books Collection",
            item_category="Books",
            item_description="25 gently used children's books for ages 3-10",
            status=schemas.DonationStatus.PENDING,
            pickup_date=date(2023, 11, 15),
            pickup_time_preference="Morning (9AM - 12PM)",
            created_at=now,
        ),
        schemas.DonationItem(
            id="don-2",
            reference_number="DN-DEF456UVW",
            donor_id="donor-2",
            donor_name="Mike Contributor",
            donor_email="mike@example.com",
            donor_phone="555-666-7777",
            address="101 Maple Dr",
            city="Anytown",
            zip_code="12346",
            item_title="Winter Clothing Bundle",
            item_category="Clothing",
            item_description="10 winter jackets, 15 scarves, 20 pairs of gloves - all in good condition",
            status=schemas.DonationStatus.APPROVED,
            pickup_date=date(2023, 11, 18),
            pickup_time_preference="Afternoon (12PM - 5PM)",
            created_at=now,
        ),
    ]
    return [user], locations, donations


def initialize_store(store: KeyValueStore) -> bool:
    """
    Populates an empty store with a sample volunteer, two pickup locations and
    two donations. Does nothing if any collection already holds records.
    Returns True when sample data was written.
    """
    if any(load_collection(store, key) for key in (USERS_KEY, DONATIONS_KEY, PICKUP_LOCATIONS_KEY)):
        return False

    users, locations, donations = _sample_records()
    for key, records in ((USERS_KEY, users), (PICKUP_LOCATIONS_KEY, locations), (DONATIONS_KEY, donations)):
        save_collection(
            store, key, [record.model_dump(mode="json", by_alias=True, exclude_none=True) for record in records]
        )

    logger.info("Store initialized with sample data")
    return True
