"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 07 2025
# SPDX-License-Identifier: MIT
"""

import logging
from typing import Optional

from donationhub.config import settings
from donationhub.crud import crud_user
from donationhub.db.storage import KeyValueStore
from donationhub.schemas import schemas
from donationhub.utils import clock

logger = logging.getLogger(__name__)


def is_certificate_eligible(
    achievements: Optional[schemas.Achievements],
    pickup_threshold: Optional[int] = None,
    distribution_threshold: Optional[int] = None,
) -> bool:
    """
    Pure check of the two lifetime counters against the certificate thresholds.
    """
    if achievements is None:
        return False
    if pickup_threshold is None:
        pickup_threshold = settings.certificate_pickup_threshold
    if distribution_threshold is None:
        distribution_threshold = settings.certificate_distribution_threshold
    return (
        achievements.total_pickups >= pickup_threshold
        and achievements.total_distributions >= distribution_threshold
    )


class AchievementService:
    """
    Maintains volunteer pickup/distribution counters and the one-way
    certificate latch stored on each user record.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def increment_pickup_count(self, volunteer_id: str) -> Optional[schemas.User]:
        return self._increment(volunteer_id, "total_pickups")

    def increment_distribution_count(self, volunteer_id: str) -> Optional[schemas.User]:
        return self._increment(volunteer_id, "total_distributions")

    def _increment(self, volunteer_id: str, counter: str) -> Optional[schemas.User]:
        user = crud_user.get_user(self.store, volunteer_id)
        if user is None:
            logger.warning("Volunteer %s not found, %s not incremented", volunteer_id, counter)
            return None

        if user.achievements is None:
            user.achievements = schemas.Achievements()
        setattr(user.achievements, counter, getattr(user.achievements, counter) + 1)

        crud_user.save_user(self.store, user)
        self.evaluate_certification(user)
        return user

    def evaluate_certification(self, user: schemas.User) -> bool:
        """
        Issues the certificate the first time both thresholds are met.
        Once issued it is never revoked and its date never changes.
        """
        if user.achievements is None:
            return False
        if user.achievements.certificate_issued:
            return True
        if not is_certificate_eligible(user.achievements):
            return False

        user.achievements.certificate_issued = True
        user.achievements.certificate_date = clock.utcnow()
        crud_user.save_user(self.store, user)
        logger.info("Certificate issued to volunteer %s", user.id)
        return True

    def get_stats(self, volunteer_id: str) -> Optional[schemas.VolunteerStats]:
        user = crud_user.get_user(self.store, volunteer_id)
        if user is None:
            return None

        achievements = user.achievements or schemas.Achievements()
        return schemas.VolunteerStats(
            total_pickups=achievements.total_pickups,
            total_distributions=achievements.total_distributions,
            certificate_eligible=is_certificate_eligible(achievements),
            certificate_issued=achievements.certificate_issued,
            certificate_date=achievements.certificate_date,
        )

    def get_certificate(self, volunteer_id: str) -> Optional[schemas.Certificate]:
        user = crud_user.get_user(self.store, volunteer_id)
        if user is None or user.achievements is None or not user.achievements.certificate_issued:
            return None

        return schemas.Certificate(
            volunteer_id=user.id,
            volunteer_name=user.name,
            total_pickups=user.achievements.total_pickups,
            total_distributions=user.achievements.total_distributions,
            certificate_date=user.achievements.certificate_date,
        )
