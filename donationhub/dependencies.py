"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Oct 08 2025
# SPDX-License-Identifier: MIT
"""

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from donationhub.crud import crud_session, crud_user
from donationhub.db.database import get_db
from donationhub.db.storage import KeyValueStore, SqlKeyValueStore
from donationhub.schemas import schemas


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """
    FastAPI dependency providing the key-value store for the current request.
    """
    return SqlKeyValueStore(db)


def get_current_user(store: KeyValueStore = Depends(get_store)) -> schemas.User:
    """
    FastAPI dependency resolving the signed-in user from the session marker.
    A marker pointing at a missing user is cleared.
    """
    not_authenticated = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
    user_id = crud_session.get_current_user_id(store)
    if user_id is None:
        raise not_authenticated

    user = crud_user.get_user(store, user_id)
    if user is None:
        crud_session.clear_current_user_id(store)
        raise not_authenticated
    return user
