"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 06 2025
# SPDX-License-Identifier: MIT
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from donationhub.db import models

USERS_KEY = "users"
DONATIONS_KEY = "donations"
PICKUP_LOCATIONS_KEY = "pickupLocations"
CURRENT_USER_KEY = "currentUserId"


class KeyValueStore(ABC):
    """
    Flat string key-value namespace every registry reads and writes through.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...


class SqlKeyValueStore(KeyValueStore):
    """
    Key-value store persisted in the kv_store table. Every write commits.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        entry = self.db.query(models.KeyValueEntry).filter(models.KeyValueEntry.key == key).first()
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = self.db.query(models.KeyValueEntry).filter(models.KeyValueEntry.key == key).first()
        if entry:
            entry.value = value
        else:
            self.db.add(models.KeyValueEntry(key=key, value=value))
        self.db.commit()

    def delete(self, key: str) -> None:
        self.db.query(models.KeyValueEntry).filter(models.KeyValueEntry.key == key).delete()
        self.db.commit()

    def keys(self) -> List[str]:
        rows = self.db.query(models.KeyValueEntry.key).order_by(models.KeyValueEntry.key).all()
        return [key for (key,) in rows]


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._data)


def load_collection(store: KeyValueStore, key: str) -> List[Dict[str, Any]]:
    """
    Decodes the JSON array stored under key. A missing key is an empty collection.
    """
    raw = store.get(key)
    return json.loads(raw) if raw else []


def save_collection(store: KeyValueStore, key: str, records: List[Dict[str, Any]]) -> None:
    store.set(key, json.dumps(records))
