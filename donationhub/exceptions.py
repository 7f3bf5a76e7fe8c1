# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#


class DonationHubError(Exception):
    """Base class for record store errors."""


class DuplicateEmailError(DonationHubError):
    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class InvalidTransitionError(DonationHubError):
    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move donation from '{current}' to '{target}'")
        self.current = current
        self.target = target
