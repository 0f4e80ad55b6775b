"""Application service: Register User use case."""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import User, UserRole
from storefront.domain.model.value_objects import Email
from storefront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


def new_user_id() -> str:
    return uuid.uuid4().hex


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        id_factory: Callable[[], str] = new_user_id,
    ) -> None:
        self._user_repo = user_repo
        self._id_factory = id_factory

    async def handle(self, email: str, name: str, role: str = "customer") -> User:
        """Register a new account; e-mail addresses must be unique."""
        address = Email(email)
        if not name or not name.strip():
            raise ValidationError("User name is required")
        try:
            user_role = UserRole(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}") from exc

        existing = await self._user_repo.get_by_email(address.value)
        if existing is not None:
            raise ValidationError(f"User '{address}' already exists")

        user = User(
            id=self._id_factory(),
            email=address.value,
            name=name.strip(),
            role=user_role,
        )
        await self._user_repo.save(user)
        logger.info("User %s registered as %s", user.email, user.role.value)
        return user
