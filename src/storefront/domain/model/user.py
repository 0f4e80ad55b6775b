"""User entity, as returned by the backend after registration or login."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:

    id: str
    email: str
    name: str
    role: UserRole = UserRole.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
