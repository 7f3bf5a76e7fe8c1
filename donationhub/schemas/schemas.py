# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date, datetime
from enum import Enum
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Records are stored and served with camelCase keys; Python code uses snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_data_uri(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.startswith("data:"):
        raise ValueError("profile picture must be a data URI")
    return value


# --- Donation status ---

class DonationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    PICKED_UP = "picked-up"
    DISTRIBUTED = "distributed"

    def can_advance_to(self, target: "DonationStatus") -> bool:
        return target in _ALLOWED_TRANSITIONS[self]

    @property
    def is_matchable(self) -> bool:
        return self in (DonationStatus.PENDING, DonationStatus.APPROVED)


_ALLOWED_TRANSITIONS: Dict[DonationStatus, FrozenSet[DonationStatus]] = {
    DonationStatus.PENDING: frozenset({DonationStatus.APPROVED}),
    DonationStatus.APPROVED: frozenset({DonationStatus.PICKED_UP}),
    DonationStatus.PICKED_UP: frozenset({DonationStatus.DISTRIBUTED}),
    DonationStatus.DISTRIBUTED: frozenset(),
}


# --- User Schemas ---

class Achievements(CamelModel):
    total_pickups: int = 0
    total_distributions: int = 0
    certificate_issued: bool = False
    certificate_date: Optional[datetime] = None


class UserBase(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    profile_picture: Optional[str] = None

    @field_validator("profile_picture")
    @classmethod
    def check_data_uri(cls, value: Optional[str]) -> Optional[str]:
        return _check_data_uri(value)


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class User(UserBase):
    id: str
    password: str
    registered_at: datetime
    achievements: Optional[Achievements] = None


class UserPublic(UserBase):
    id: str
    registered_at: datetime
    achievements: Optional[Achievements] = None


class UserUpdate(CamelModel):
    """
    Fields a user may change on their own profile. Identity, registration time
    and achievements are deliberately absent.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    password: Optional[str] = Field(default=None, min_length=1)
    profile_picture: Optional[str] = None

    @field_validator("profile_picture")
    @classmethod
    def check_data_uri(cls, value: Optional[str]) -> Optional[str]:
        return _check_data_uri(value)


class ProfilePictureUpdate(CamelModel):
    profile_picture: str

    @field_validator("profile_picture")
    @classmethod
    def check_data_uri(cls, value: str) -> str:
        return _check_data_uri(value)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


# --- Donation Schemas ---

class DonationBase(CamelModel):
    donor_id: str = "guest-donor"
    donor_name: str = Field(min_length=1)
    donor_email: EmailStr
    donor_phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    item_title: str = Field(min_length=1)
    item_category: str = Field(min_length=1)
    item_description: str = Field(min_length=1)
    pickup_date: date
    pickup_time_preference: str = Field(min_length=1)
    special_instructions: Optional[str] = None


class DonationCreate(DonationBase):
    pass


class DonationItem(DonationBase):
    id: str
    reference_number: str
    status: DonationStatus = DonationStatus.PENDING
    created_at: datetime
    picked_up_by: Optional[str] = None
    picked_up_at: Optional[datetime] = None
    distributed_by: Optional[str] = None
    distributed_at: Optional[datetime] = None
    distribution_location: Optional[str] = None


class StatusUpdate(CamelModel):
    status: DonationStatus
    distribution_location_id: Optional[str] = None


# --- Pickup Location Schemas ---

class PickupLocationBase(CamelModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    contact_person: str = Field(min_length=1)
    contact_phone: str = Field(min_length=1)


class PickupLocationCreate(PickupLocationBase):
    pass


class PickupLocation(PickupLocationBase):
    id: str


# --- Statistics Schemas ---

class VolunteerStats(CamelModel):
    total_pickups: int
    total_distributions: int
    certificate_eligible: bool
    certificate_issued: bool
    certificate_date: Optional[datetime] = None


class Certificate(CamelModel):
    volunteer_id: str
    volunteer_name: str
    total_pickups: int
    total_distributions: int
    certificate_date: datetime
