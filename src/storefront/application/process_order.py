"""Application service: Process Order use case.

Moves a pending order into processing. Stock was already taken when
the order was created, so product stock is not touched here.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ProcessOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    async def handle(self, order_id: str) -> Order:
        order = await self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order = order.process()
        await self._order_repo.save(order)
        logger.info("Order %s is now %s", order.id, order.status.value)
        return order
