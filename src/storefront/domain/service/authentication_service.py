"""Domain service interface: credential checks and token issuance.

The domain only states what it needs; the backend-specific token scheme
lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class AuthenticationService(ABC):

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> str:
        """Verify credentials and return an access token.

        Raises AuthenticationError when the backend rejects them.
        """

    @abstractmethod
    async def validate_token(self, token: str) -> User:
        """Return the user a token belongs to.

        Raises AuthenticationError for an unknown or expired token.
        """
