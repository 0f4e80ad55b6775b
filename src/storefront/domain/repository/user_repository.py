"""Abstract repository for User entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Return the user registered under *email*, or None."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Register a new user."""
