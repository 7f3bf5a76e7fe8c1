"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Oct 08 2025
# SPDX-License-Identifier: MIT
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from donationhub.crud import crud_session, crud_user
from donationhub.db.storage import KeyValueStore
from donationhub.dependencies import get_store
from donationhub.exceptions import DuplicateEmailError
from donationhub.schemas import schemas

router = APIRouter(
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)


@router.post("/register", response_model=schemas.UserPublic, status_code=status.HTTP_201_CREATED)
def register_user(user: schemas.UserCreate, store: KeyValueStore = Depends(get_store)):
    """
    Registers a new volunteer account.
    """
    try:
        return crud_user.create_user(store, user)
    except DuplicateEmailError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")


@router.post("/login", response_model=schemas.UserPublic)
def login(credentials: schemas.LoginRequest, store: KeyValueStore = Depends(get_store)):
    """
    Checks the credentials and marks the user as the signed-in user.
    """
    user = crud_user.authenticate_user(store, credentials.email, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password")

    crud_session.set_current_user_id(store, user.id)
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(store: KeyValueStore = Depends(get_store)):
    crud_session.clear_current_user_id(store)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
