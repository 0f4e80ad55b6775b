"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    async def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return every order placed by a customer."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Persist a new or updated order."""
