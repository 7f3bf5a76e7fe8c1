# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from typing import List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from donationhub.db.storage import USERS_KEY, KeyValueStore, load_collection, save_collection
from donationhub.exceptions import DuplicateEmailError
from donationhub.schemas import schemas
from donationhub.utils import clock
from donationhub.utils.identifiers import generate_id

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


def _dump(user: schemas.User) -> dict:
    return user.model_dump(mode="json", by_alias=True, exclude_none=True)


def get_users(store: KeyValueStore) -> List[schemas.User]:
    return [schemas.User.model_validate(record) for record in load_collection(store, USERS_KEY)]


def get_user(store: KeyValueStore, user_id: str) -> Optional[schemas.User]:
    return next((user for user in get_users(store) if user.id == user_id), None)


def normalize_email(email: str) -> Optional[str]:
    """
    Applies the same normalization registration does. None for invalid addresses.
    """
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        return None


def get_user_by_email(store: KeyValueStore, email: str) -> Optional[schemas.User]:
    email = normalize_email(email)
    if email is None:
        return None
    return next((user for user in get_users(store) if user.email == email), None)


def create_user(store: KeyValueStore, user: schemas.UserCreate) -> schemas.User:
    """
    Registers a new user with zeroed achievements.
    Raises DuplicateEmailError without writing anything if the email is taken.
    """
    records = load_collection(store, USERS_KEY)
    if any(record.get("email") == user.email for record in records):
        raise DuplicateEmailError(user.email)

    db_user = schemas.User(
        **user.model_dump(),
        id=generate_id(),
        registered_at=clock.utcnow(),
        achievements=schemas.Achievements(),
    )
    records.append(_dump(db_user))
    save_collection(store, USERS_KEY, records)
    logger.info("Registered user %s", db_user.id)
    return db_user


def authenticate_user(store: KeyValueStore, email: str, password: str) -> Optional[schemas.User]:
    # Plaintext comparison; credential hardening is outside this store.
    user = get_user_by_email(store, email)
    if user and user.password == password:
        return user
    return None


def save_user(store: KeyValueStore, user: schemas.User) -> Optional[schemas.User]:
    """
    Replaces the stored record with the same id. Returns None if there is none.
    """
    records = load_collection(store, USERS_KEY)
    for index, record in enumerate(records):
        if record.get("id") == user.id:
            records[index] = _dump(user)
            save_collection(store, USERS_KEY, records)
            return user
    return None


def update_user(store: KeyValueStore, user_id: str, updates: schemas.UserUpdate) -> Optional[schemas.User]:
    db_user = get_user(store, user_id)
    if db_user is None:
        return None

    update_data = updates.model_dump(exclude_unset=True)
    new_email = update_data.get("email")
    if new_email is not None and new_email != db_user.email:
        owner = get_user_by_email(store, new_email)
        if owner is not None and owner.id != user_id:
            raise DuplicateEmailError(new_email)

    for key, value in update_data.items():
        if value is not None:
            setattr(db_user, key, value)

    return save_user(store, db_user)


def update_profile_picture(store: KeyValueStore, user_id: str, profile_picture: str) -> Optional[schemas.User]:
    return update_user(store, user_id, schemas.UserUpdate(profile_picture=profile_picture))
