# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from donationhub.db.storage import PICKUP_LOCATIONS_KEY, KeyValueStore, load_collection, save_collection
from donationhub.schemas import schemas
from donationhub.utils.identifiers import generate_id


def get_locations(store: KeyValueStore) -> List[schemas.PickupLocation]:
    return [schemas.PickupLocation.model_validate(record) for record in load_collection(store, PICKUP_LOCATIONS_KEY)]


def get_location(store: KeyValueStore, location_id: str) -> Optional[schemas.PickupLocation]:
    return next((location for location in get_locations(store) if location.id == location_id), None)


def create_location(store: KeyValueStore, location: schemas.PickupLocationCreate) -> schemas.PickupLocation:
    db_location = schemas.PickupLocation(**location.model_dump(), id=generate_id())
    records = load_collection(store, PICKUP_LOCATIONS_KEY)
    records.append(db_location.model_dump(mode="json", by_alias=True))
    save_collection(store, PICKUP_LOCATIONS_KEY, records)
    return db_location
