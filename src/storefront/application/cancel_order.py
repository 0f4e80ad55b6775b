"""Application service: Cancel Order use case.

Pending and processing orders can be cancelled. Stock taken when the
order was placed is *not* returned to the products.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, order_id: str) -> Order:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order = order.cancel()
        await self._order_repo.save(order)
        logger.info("Order %s cancelled", order.id)
        return order
