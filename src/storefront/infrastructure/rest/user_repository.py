"""REST-backed implementation of UserRepository."""

from __future__ import annotations

from typing import Any

from storefront.domain.model.user import User, UserRole
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.rest.client import ApiClient, ApiError


class ApiUserRepository(UserRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- UserRepository interface ---------------------------------------------

    async def get_by_email(self, email: str) -> User | None:
        raw = await self._client.get("/users", params={"email": email})
        if not raw:
            return None
        return user_from_raw(raw[0])

    async def save(self, user: User) -> None:
        await self._client.post("/users", user_to_raw(user))


# --- Serialization ------------------------------------------------------------
# Shared with the authentication service, which receives users from /me.


def user_to_raw(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role.value,
    }


def user_from_raw(raw: dict[str, Any]) -> User:
    try:
        return User(
            id=str(raw["id"]),
            email=raw["email"],
            name=raw.get("name", ""),
            role=UserRole(raw.get("role", UserRole.CUSTOMER.value)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ApiError(f"Malformed user in response: {exc!r}") from exc
