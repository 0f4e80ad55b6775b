"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authentication_service import AuthenticationService
from storefront.infrastructure.config import Settings
from storefront.infrastructure.rest.authentication_service import (
    ApiAuthenticationService,
)
from storefront.infrastructure.rest.client import ApiClient
from storefront.infrastructure.rest.order_repository import ApiOrderRepository
from storefront.infrastructure.rest.product_repository import ApiProductRepository
from storefront.infrastructure.rest.user_repository import ApiUserRepository


@dataclass(frozen=True)
class Wiring:
    """The set of collaborators one CLI command works with."""

    product_repo: ProductRepository
    order_repo: OrderRepository
    user_repo: UserRepository
    auth_service: AuthenticationService
    currency: str = "USD"


WiringFactory = Callable[[Settings, Optional[str]], AsyncContextManager[Wiring]]


@asynccontextmanager
async def rest_wiring(settings: Settings, token: str | None = None) -> AsyncIterator[Wiring]:
    """Yield REST-backed collaborators sharing one HTTP client."""
    async with ApiClient(
        settings.API_BASE_URL,
        token=token,
        timeout=settings.REQUEST_TIMEOUT,
    ) as client:
        yield Wiring(
            product_repo=ApiProductRepository(client, settings.DEFAULT_CURRENCY),
            order_repo=ApiOrderRepository(client, settings.DEFAULT_CURRENCY),
            user_repo=ApiUserRepository(client),
            auth_service=ApiAuthenticationService(client),
            currency=settings.DEFAULT_CURRENCY,
        )
