# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from fastapi import APIRouter, Depends, HTTPException, status

from donationhub.crud import crud_user
from donationhub.db.storage import KeyValueStore
from donationhub.dependencies import get_current_user, get_store
from donationhub.exceptions import DuplicateEmailError
from donationhub.schemas import schemas
from donationhub.services.achievement_service import AchievementService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={404: {"description": "Not found"}},
)


@router.get("/me", response_model=schemas.UserPublic)
def read_users_me(current_user: schemas.User = Depends(get_current_user)):
    """
    Retrieves the signed-in user's profile.
    """
    return current_user


@router.put("/me", response_model=schemas.UserPublic)
def update_users_me(
    updates: schemas.UserUpdate,
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    """
    Updates the signed-in user's profile. Achievements cannot be changed here.
    """
    try:
        db_user = crud_user.update_user(store, current_user.id, updates)
    except DuplicateEmailError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    if db_user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return db_user


@router.put("/me/picture", response_model=schemas.UserPublic)
def update_users_me_picture(
    picture: schemas.ProfilePictureUpdate,
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    db_user = crud_user.update_profile_picture(store, current_user.id, picture.profile_picture)
    if db_user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return db_user


@router.get("/me/stats", response_model=schemas.VolunteerStats)
def read_users_me_stats(
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    return AchievementService(store).get_stats(current_user.id)


@router.get("/me/certificate", response_model=schemas.Certificate)
def read_users_me_certificate(
    current_user: schemas.User = Depends(get_current_user),
    store: KeyValueStore = Depends(get_store),
):
    """
    Retrieves the signed-in volunteer's certificate once it has been issued.
    """
    certificate = AchievementService(store).get_certificate(current_user.id)
    if certificate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Certificate not issued")
    return certificate


@router.get("/{user_id}/stats", response_model=schemas.VolunteerStats)
def read_user_stats(user_id: str, store: KeyValueStore = Depends(get_store)):
    stats = AchievementService(store).get_stats(user_id)
    if stats is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return stats
