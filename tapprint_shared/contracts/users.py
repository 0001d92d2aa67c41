"""User account contracts."""

from __future__ import annotations

from enum import Enum

from tapprint_shared.contracts.base import BaseEntity


class UserRole(str, Enum):
    """Account roles."""

    ADMIN = "admin"
    USER = "user"


class User(BaseEntity):
    """Account record."""

    email: str
    name: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
