"""REST-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Any

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.rest.client import ApiClient, ApiError


class ApiProductRepository(ProductRepository):

    def __init__(self, client: ApiClient, currency: str = DEFAULT_CURRENCY) -> None:
        self._client = client
        self._currency = currency

    # --- ProductRepository interface ------------------------------------------

    async def get_by_id(self, product_id: str) -> Product | None:
        raw = await self._client.get_optional(f"/products/{product_id}")
        if not raw:
            return None
        return self._to_domain(raw)

    async def list_all(self) -> list[Product]:
        raw = await self._client.get("/products")
        return [self._to_domain(item) for item in raw or []]

    async def save(self, product: Product) -> None:
        await self._client.put(f"/products/{product.id}", self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": float(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
        }

    def _to_domain(self, raw: dict[str, Any]) -> Product:
        try:
            return Product(
                id=str(raw["id"]),
                name=raw["name"],
                price=Money.create(raw["price"], raw.get("currency") or self._currency),
                stock=int(raw.get("stock", 0)),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ApiError(f"Malformed product in response: {exc!r}") from exc
