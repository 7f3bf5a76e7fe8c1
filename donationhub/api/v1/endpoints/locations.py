# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, status

from donationhub.crud import crud_location
from donationhub.db.storage import KeyValueStore
from donationhub.dependencies import get_store
from donationhub.schemas import schemas

router = APIRouter(
    prefix="/locations",
    tags=["Pickup Locations"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.PickupLocation, status_code=status.HTTP_201_CREATED)
def create_location(location: schemas.PickupLocationCreate, store: KeyValueStore = Depends(get_store)):
    return crud_location.create_location(store, location)


@router.get("/", response_model=List[schemas.PickupLocation])
def read_locations(store: KeyValueStore = Depends(get_store)):
    """
    Retrieves all distribution centers in the order they were added.
    """
    return crud_location.get_locations(store)
