"""Application service: Authenticate User use case.

Checks that the account exists before handing the credentials to the
authentication backend, so unknown e-mails never reach it.
"""

from __future__ import annotations

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.value_objects import Email, Password
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authentication_service import AuthenticationService


class AuthenticateUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        auth_service: AuthenticationService,
    ) -> None:
        self._user_repo = user_repo
        self._auth_service = auth_service

    async def handle(self, email: str, password: str) -> str:
        """Return an access token for valid credentials."""
        address = Email(email)
        secret = Password(password)

        user = await self._user_repo.get_by_email(address.value)
        if user is None:
            raise AuthenticationError("User not found")

        return await self._auth_service.authenticate(address.value, secret.value)
