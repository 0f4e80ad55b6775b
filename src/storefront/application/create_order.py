"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Each requested line takes stock from its product and is persisted
immediately; the order itself is saved only once every line succeeded.
There is no rollback, so a failure on a later line leaves the stock
taken by earlier lines committed.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.application.dto import OrderItemSpec
from storefront.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storefront.domain.model.order import Order, OrderItem, new_order_id
from storefront.domain.model.value_objects import ProductId, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        id_factory: Callable[[], str] = new_order_id,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._id_factory = id_factory

    async def handle(self, customer_id: str, item_specs: list[OrderItemSpec]) -> Order:
        """Place a new order for *customer_id*.

        Steps, per requested line:
        1. Resolve the product (fail if not found).
        2. Check its stock.
        3. Append an OrderItem with the *current* price (snapshot).
        4. Decrease the stock and persist the product.
        Finally persist the order and return it.
        """
        order = Order(id=self._id_factory(), customer_id=customer_id)

        for spec in item_specs:
            product_id = ProductId(spec.product_id)
            quantity = Quantity(spec.quantity)

            product = await self._product_repo.get_by_id(product_id.value)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")

            if product.stock < quantity.value:
                raise InsufficientStockError(
                    f"Insufficient stock for product {product.name}"
                )

            # A line the order rejects must not take stock.
            order = order.add_item(
                OrderItem(
                    product_id=product.id,
                    quantity=quantity.value,
                    price=product.price,  # <-- price snapshot
                )
            )

            product = product.decrease_stock(quantity.value)
            await self._product_repo.save(product)

        await self._order_repo.save(order)
        logger.info(
            "Order %s created for customer %s (%d items, total %s)",
            order.id,
            customer_id,
            len(order.items),
            order.total_amount,
        )
        return order
