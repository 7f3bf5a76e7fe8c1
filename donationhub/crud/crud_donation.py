# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from typing import List, Optional

from donationhub.config import settings
from donationhub.crud import crud_user
from donationhub.db.storage import DONATIONS_KEY, KeyValueStore, load_collection, save_collection
from donationhub.exceptions import InvalidTransitionError
from donationhub.schemas import schemas
from donationhub.schemas.schemas import DonationStatus
from donationhub.services.achievement_service import AchievementService
from donationhub.utils import clock
from donationhub.utils.identifiers import generate_id, generate_reference_number

logger = logging.getLogger(__name__)


def _dump(donation: schemas.DonationItem) -> dict:
    return donation.model_dump(mode="json", by_alias=True, exclude_none=True)


def get_donations(store: KeyValueStore) -> List[schemas.DonationItem]:
    return [schemas.DonationItem.model_validate(record) for record in load_collection(store, DONATIONS_KEY)]


def get_donation(store: KeyValueStore, donation_id: str) -> Optional[schemas.DonationItem]:
    return next((donation for donation in get_donations(store) if donation.id == donation_id), None)


def get_donations_by_donor(store: KeyValueStore, donor_id: str) -> List[schemas.DonationItem]:
    return [donation for donation in get_donations(store) if donation.donor_id == donor_id]


def get_donation_by_reference(store: KeyValueStore, reference_number: str) -> Optional[schemas.DonationItem]:
    return next(
        (donation for donation in get_donations(store) if donation.reference_number == reference_number), None
    )


def get_donations_by_zip(store: KeyValueStore, zip_code: str) -> List[schemas.DonationItem]:
    """
    Donations in a zip code that a volunteer can still claim.
    """
    return [
        donation for donation in get_donations(store)
        if donation.zip_code == zip_code and donation.status.is_matchable
    ]


def get_available_donations(store: KeyValueStore) -> List[schemas.DonationItem]:
    return [donation for donation in get_donations(store) if donation.status.is_matchable]


def get_matched_donations(store: KeyValueStore, user: schemas.User) -> List[schemas.DonationItem]:
    """
    Claimable donations for a volunteer: those in their own zip code, or every
    available donation when they have not set one.
    """
    if user.zip_code:
        return get_donations_by_zip(store, user.zip_code)
    return get_available_donations(store)


def get_picked_up_donations(store: KeyValueStore, volunteer_id: Optional[str] = None) -> List[schemas.DonationItem]:
    return [
        donation for donation in get_donations(store)
        if donation.status == DonationStatus.PICKED_UP
        and (volunteer_id is None or donation.picked_up_by == volunteer_id)
    ]


def create_donation(store: KeyValueStore, donation: schemas.DonationCreate) -> schemas.DonationItem:
    db_donation = schemas.DonationItem(
        **donation.model_dump(),
        id=generate_id(),
        reference_number=generate_reference_number(),
        status=DonationStatus.PENDING,
        created_at=clock.utcnow(),
    )
    records = load_collection(store, DONATIONS_KEY)
    records.append(_dump(db_donation))
    save_collection(store, DONATIONS_KEY, records)
    logger.info("Created donation %s (%s)", db_donation.id, db_donation.reference_number)
    return db_donation


def update_donation_status(
    store: KeyValueStore,
    donation_id: str,
    status: DonationStatus,
    volunteer_id: Optional[str] = None,
    distribution_location_id: Optional[str] = None,
) -> Optional[schemas.DonationItem]:
    """
    Moves a donation to a new status and credits the volunteer who picked it
    up or distributed it.

    Returns None if the donation or the volunteer does not exist. Raises
    InvalidTransitionError when the target is not a known status, or when
    strict transitions are enabled and the move is not the next step forward.
    None of these cases writes anything.
    """
    records = load_collection(store, DONATIONS_KEY)
    index = next((i for i, record in enumerate(records) if record.get("id") == donation_id), None)
    if index is None:
        return None

    db_donation = schemas.DonationItem.model_validate(records[index])
    previous_status = db_donation.status
    try:
        status = DonationStatus(status)
    except ValueError:
        raise InvalidTransitionError(previous_status.value, str(status))
    if previous_status == status:
        return db_donation

    if settings.strict_status_transitions and not previous_status.can_advance_to(status):
        logger.warning(
            "Rejected transition %s -> %s for donation %s", previous_status.value, status.value, donation_id
        )
        raise InvalidTransitionError(previous_status.value, status.value)

    if volunteer_id is not None and crud_user.get_user(store, volunteer_id) is None:
        logger.warning("Volunteer %s not found, donation %s left unchanged", volunteer_id, donation_id)
        return None

    db_donation.status = status
    credit = None
    if volunteer_id is not None:
        if status == DonationStatus.PICKED_UP:
            db_donation.picked_up_by = volunteer_id
            db_donation.picked_up_at = clock.utcnow()
            credit = "pickup"
        elif status == DonationStatus.DISTRIBUTED:
            db_donation.distributed_by = volunteer_id
            db_donation.distributed_at = clock.utcnow()
            if distribution_location_id:
                db_donation.distribution_location = distribution_location_id
            credit = "distribution"

    records[index] = _dump(db_donation)
    save_collection(store, DONATIONS_KEY, records)
    logger.info("Donation %s moved %s -> %s", donation_id, previous_status.value, status.value)

    achievement_service = AchievementService(store)
    if credit == "pickup":
        achievement_service.increment_pickup_count(volunteer_id)
    elif credit == "distribution":
        achievement_service.increment_distribution_count(volunteer_id)

    return db_donation
