"""Token-based AuthenticationService backed by the REST API.

``POST /login`` exchanges credentials for a bearer token and
``GET /me`` resolves a token back to its user.
"""

from __future__ import annotations

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.model.user import User
from storefront.domain.service.authentication_service import AuthenticationService
from storefront.infrastructure.rest.client import ApiClient, ApiError
from storefront.infrastructure.rest.user_repository import user_from_raw

_UNAUTHORIZED = (401, 403)


class ApiAuthenticationService(AuthenticationService):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def authenticate(self, email: str, password: str) -> str:
        try:
            raw = await self._client.post(
                "/login", {"email": email, "password": password}
            )
        except ApiError as exc:
            if exc.status_code in _UNAUTHORIZED:
                raise AuthenticationError("Invalid email or password") from exc
            raise

        token = (raw or {}).get("token")
        if not token:
            raise AuthenticationError("Login response did not include a token")
        return token

    async def validate_token(self, token: str) -> User:
        try:
            raw = await self._client.get(
                "/me", headers={"Authorization": f"Bearer {token}"}
            )
        except ApiError as exc:
            if exc.status_code in _UNAUTHORIZED:
                raise AuthenticationError("Session token is invalid or expired") from exc
            raise

        if not raw:
            raise AuthenticationError("Session token is invalid or expired")
        return user_from_raw(raw)
