# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import Optional

from donationhub.db.storage import CURRENT_USER_KEY, KeyValueStore


def get_current_user_id(store: KeyValueStore) -> Optional[str]:
    return store.get(CURRENT_USER_KEY) or None


def set_current_user_id(store: KeyValueStore, user_id: str) -> None:
    store.set(CURRENT_USER_KEY, user_id)


def clear_current_user_id(store: KeyValueStore) -> None:
    store.delete(CURRENT_USER_KEY)
