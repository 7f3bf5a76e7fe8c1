# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
