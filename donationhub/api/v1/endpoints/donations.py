# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from donationhub.crud import crud_donation
from donationhub.db.storage import KeyValueStore
from donationhub.dependencies import get_current_user, get_store
from donationhub.exceptions import InvalidTransitionError
from donationhub.schemas import schemas

router = APIRouter(
    prefix="/donations",
    tags=["Donations"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.DonationItem, status_code=status.HTTP_201_CREATED)
def create_donation(donation: schemas.DonationCreate, store: KeyValueStore = Depends(get_store)):
    """
    Records a donor's item. The response carries the reference number used to track it.
    """
    return crud_donation.create_donation(store, donation)


@router.get("/", response_model=List[schemas.DonationItem])
def read_donations(store: KeyValueStore = Depends(get_store)):
    return crud_donation.get_donations(store)


@router.get("/available", response_model=List[schemas.DonationItem])
def read_available_donations(zip_code: Optional[str] = None, store: KeyValueStore = Depends(get_store)):
    """
    Pending and approved donations, optionally restricted to one zip code.
    """
    if zip_code:
        return crud_donation.get_donations_by_zip(store, zip_code)
    return crud_donation.get_available_donations(store)


@router.get("/matched", response_model=List[schemas.DonationItem])
def read_matched_donations(
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    """
    Donations the signed-in volunteer can claim near their own zip code.
    """
    return crud_donation.get_matched_donations(store, current_user)


@router.get("/picked-up",response_model=List[schemas.DonationItem])
def read_picked_up_donations(volunteer_id: Optional[str] = None, store: KeyValueStore = Depends(get_store)):
    return crud_donation.get_picked_up_donations(store, volunteer_id)


@router.get("/donor/{donor_id}", response_model=List[schemas.DonationItem])
def read_donor_donations(donor_id: str, store: KeyValueStore = Depends(get_store)):
    return crud_donation.get_donations_by_donor(store, donor_id)


@router.get("/reference/{reference_number}", response_model=schemas.DonationItem)
def read_donation_by_reference(reference_number: str, store: KeyValueStore = Depends(get_store)):
    db_donation = crud_donation.get_donation_by_reference(store, reference_number)
    if db_donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donation not found")
    return db_donation


@router.get("/{donation_id}", response_model=schemas.DonationItem)
def read_donation(donation_id: str, store: KeyValueStore = Depends(get_store)):
    db_donation = crud_donation.get_donation(store, donation_id)
    if db_donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donation not found")
    return db_donation


@router.put("/{donation_id}/status", response_model=schemas.DonationItem)
def update_donation_status(
    donation_id: str,
    update: schemas.StatusUpdate,
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    """
    Advances a donation on behalf of the signed-in volunteer, who is credited
    for pickups and distributions.
    """
    try:
        db_donation = crud_donation.update_donation_status(
            store,
            donation_id,
            update.status,
            volunteer_id=current_user.id,
            distribution_location_id=update.distribution_location_id,
        )
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if db_donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donation not found")
    return db_donation
