"""Application service: List Customer Orders use case (query)."""

from __future__ import annotations

from storefront.application.session import Session
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class ListCustomerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, session: Session) -> list[Order]:
        """Return the orders placed by the session's user."""
        return await self._order_repo.list_by_customer(session.user.id)
