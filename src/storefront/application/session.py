"""Session handling for the signed-in user.

A ``Session`` is plain data handed to whatever needs identity; there is
no module-level "current user".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.domain.exceptions import AuthenticationError, AuthorizationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authentication_service import AuthenticationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    user: User
    token: str = field(repr=False)


def require_admin(session: Session) -> None:
    """Raise AuthorizationError unless the session belongs to an admin."""
    if not session.user.is_admin:
        raise AuthorizationError("This action requires an admin account")


class StartSessionHandler:
    """Log in: authenticate, then resolve the token to its user."""

    def __init__(
        self,
        user_repo: UserRepository,
        auth_service: AuthenticationService,
    ) -> None:
        self._authenticate = AuthenticateUserHandler(user_repo, auth_service)
        self._auth_service = auth_service

    async def handle(self, email: str, password: str) -> Session:
        token = await self._authenticate.handle(email, password)
        user = await self._auth_service.validate_token(token)
        logger.info("Session started for %s", user.email)
        return Session(user=user, token=token)


class RestoreSessionHandler:
    """Rebuild a session from a token obtained by an earlier login."""

    def __init__(self, auth_service: AuthenticationService) -> None:
        self._auth_service = auth_service

    async def handle(self, token: str | None) -> Session:
        if not token:
            raise AuthenticationError("Login required")
        user = await self._auth_service.validate_token(token)
        return Session(user=user, token=token)
