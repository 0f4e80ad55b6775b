"""REST-backed implementation of OrderRepository.

``totalAmount`` is written for the backend's benefit but ignored on
read: the aggregate derives it from the line items.
"""

from __future__ import annotations

from typing import Any

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.rest.client import ApiClient, ApiError


class ApiOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient, currency: str = DEFAULT_CURRENCY) -> None:
        self._client = client
        self._currency = currency

    # --- OrderRepository interface --------------------------------------------

    async def get_by_id(self, order_id: str) -> Order | None:
        raw = await self._client.get_optional(f"/orders/{order_id}")
        if not raw:
            return None
        return self._to_domain(raw)

    async def list_by_customer(self, customer_id: str) -> list[Order]:
        raw = await self._client.get(f"/customers/{customer_id}/orders")
        return [self._to_domain(item) for item in raw or []]

    async def save(self, order: Order) -> None:
        await self._client.put(f"/orders/{order.id}", self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customerId": order.customer_id,
            "status": order.status.value,
            "items": [
                {
                    "productId": item.product_id,
                    "quantity": item.quantity,
                    "price": float(item.price.amount),
                    "currency": item.price.currency,
                }
                for item in order.items
            ],
            "totalAmount": float(order.total_amount.amount),
        }

    def _to_domain(self, raw: dict[str, Any]) -> Order:
        try:
            items = tuple(
                OrderItem(
                    product_id=str(i["productId"]),
                    quantity=int(i["quantity"]),
                    price=Money.create(i["price"], i.get("currency") or self._currency),
                )
                for i in raw.get("items") or []
            )
            return Order(
                id=str(raw["id"]),
                customer_id=str(raw["customerId"]),
                status=OrderStatus(raw.get("status", OrderStatus.PENDING.value)),
                items=items,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ApiError(f"Malformed order in response: {exc!r}") from exc
