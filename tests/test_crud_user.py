# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from donationhub.crud import crud_user
from donationhub.db.storage import USERS_KEY, load_collection
from donationhub.exceptions import DuplicateEmailError
from donationhub.schemas import schemas
from tests.test_helpers import make_user, set_achievements


def test_create_user(store, mocker):
    registered_at = datetime(2025, 10, 1, 12, 0, tzinfo=timezone.utc)
    mocker.patch('donationhub.crud.crud_user.clock.utcnow', return_value=registered_at)

    user = make_user(store, email="test@example.com", password="securepassword", city="Anytown", zip_code="12345")

    assert user.id
    assert user.email == "test@example.com"
    assert user.registered_at == registered_at
    assert user.achievements.model_dump() == schemas.Achievements().model_dump()

    stored = load_collection(store, USERS_KEY)
    assert len(stored) == 1
    assert stored[0]["zipCode"] == "12345"
    assert stored[0]["registeredAt"].startswith("2025-10-01T12:00:00")
    assert stored[0]["achievements"] == {
        "totalPickups": 0,
        "totalDistributions": 0,
        "certificateIssued": False,
    }


def test_create_user_duplicate_email(store):
    original = make_user(store, email="dup@example.com", password="first", name="First")

    with pytest.raises(DuplicateEmailError):
        make_user(store, email="dup@example.com", password="second", name="Second")

    users = crud_user.get_users(store)
    assert len(users) == 1
    assert users[0].model_dump() == original.model_dump()


def test_create_user_requires_fields():
    with pytest.raises(ValidationError):
        schemas.UserCreate(name="", email="blank@example.com", phone="555", password="pw")
    with pytest.raises(ValidationError):
        schemas.UserCreate(name="No Email", email="not-an-email", phone="555", password="pw")


def test_get_user_and_by_email(store):
    user = make_user(store, email="get@example.com")

    assert crud_user.get_user(store, user.id).model_dump() == user.model_dump()
    assert crud_user.get_user(store, "missing") is None
    assert crud_user.get_user_by_email(store, "get@example.com").id == user.id
    assert crud_user.get_user_by_email(store, "nonexistent@example.com") is None


def test_authenticate_user(store):
    user = make_user(store, email="login@example.com", password="correctpassword")

    authenticated = crud_user.authenticate_user(store, "login@example.com", "correctpassword")
    assert authenticated is not None
    assert authenticated.id == user.id

    assert crud_user.authenticate_user(store, "login@example.com", "wrongpassword") is None
    assert crud_user.authenticate_user(store, "login@example.com", "CorrectPassword") is None
    assert crud_user.authenticate_user(store, "nobody@example.com", "correctpassword") is None


def test_update_user(store):
    user = make_user(store, email="old@example.com", name="Old Name")
    user = set_achievements(store, user, total_pickups=3, total_distributions=2)

    updated = crud_user.update_user(
        store, user.id, schemas.UserUpdate(name="New Name", phone="987-654-3210", city="Springfield")
    )

    assert updated.name == "New Name"
    assert updated.phone == "987-654-3210"
    assert updated.city == "Springfield"
    assert updated.id == user.id
    assert updated.registered_at == user.registered_at
    assert updated.achievements.total_pickups == 3
    assert crud_user.get_user(store, user.id).model_dump() == updated.model_dump()


def test_update_user_ignores_protected_fields(store):
    user = make_user(store, email="protected@example.com")

    # Unknown keys are dropped by the update schema
    updates = schemas.UserUpdate.model_validate(
        {"id": "hijacked", "achievements": {"totalPickups": 99}, "name": "Renamed"}
    )
    updated = crud_user.update_user(store, user.id, updates)

    assert updated.id == user.id
    assert updated.name == "Renamed"
    assert updated.achievements.total_pickups == 0


def test_update_user_not_found(store):
    assert crud_user.update_user(store, "missing", schemas.UserUpdate(name="Nobody")) is None


def test_update_user_email_collision(store):
    make_user(store, email="taken@example.com")
    user = make_user(store, email="mine@example.com")

    with pytest.raises(DuplicateEmailError):
        crud_user.update_user(store, user.id, schemas.UserUpdate(email="taken@example.com"))

    assert crud_user.get_user(store, user.id).email == "mine@example.com"

    same = crud_user.update_user(store, user.id, schemas.UserUpdate(email="mine@example.com", name="Same"))
    assert same.name == "Same"


def test_update_profile_picture(store):
    user = make_user(store, email="picture@example.com")
    picture = "data:image/png;base64,iVBORw0KGgo="

    updated = crud_user.update_profile_picture(store, user.id, picture)

    assert updated.profile_picture == picture
    assert load_collection(store, USERS_KEY)[0]["profilePicture"] == picture
    assert crud_user.update_profile_picture(store, "missing", picture) is None


def test_update_profile_picture_rejects_non_data_uri(store):
    user = make_user(store, email="badpicture@example.com")

    with pytest.raises(ValidationError):
        crud_user.update_profile_picture(store, user.id, "https://example.com/me.png")

    assert crud_user.get_user(store, user.id).profile_picture is None


def test_save_user_unknown_id(store):
    user = make_user(store, email="save@example.com")
    ghost = user.model_copy(update={"id": "ghost"})

    assert crud_user.save_user(store, ghost) is None
    assert [u.id for u in crud_user.get_users(store)] == [user.id]


def test_authenticate_with_mixed_case_domain(store):
    user = make_user(store, email="Ann@Example.COM", password="pw")

    authenticated = crud_user.authenticate_user(store, "Ann@Example.COM", "pw")
    assert authenticated is not None
    assert authenticated.id == user.id
    assert crud_user.get_user_by_email(store, "Ann@Example.COM").id == user.id
    assert crud_user.get_user_by_email(store, "not an email") is None

    with pytest.raises(DuplicateEmailError):
        make_user(store, email="Ann@example.com", password="other")
