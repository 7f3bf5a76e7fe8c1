"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 06 2025
# SPDX-License-Identifier: MIT
"""

import random
import string

# Identifiers come from a non-cryptographic source and are never checked for
# collisions. Uniqueness is probabilistic.
_BASE36 = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """
    Returns a random 13 character base-36 record identifier.
    """
    return "".join(random.choices(_BASE36, k=13))


def generate_reference_number() -> str:
    """
    Returns a donor-facing tracking code such as DN-4K2ZQ9XA.
    """
    return "DN-" + "".join(random.choices(_BASE36, k=8)).upper()
