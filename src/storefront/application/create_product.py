"""Application service: Create Product use case."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def new_product_id() -> str:
    return uuid.uuid4().hex


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_factory: Callable[[], str] = new_product_id,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._id_factory = id_factory
        self._currency = currency

    async def handle(
        self,
        name: str,
        price: str | float | int | Decimal,
        stock: int,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=self._id_factory(),
            name=name.strip(),
            price=Money.create(price, self._currency),
            stock=stock,
        )
        await self._product_repo.save(product)
        logger.info("Product %s '%s' created at %s", product.id, product.name, product.price)
        return product
