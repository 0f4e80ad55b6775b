"""Application service: Restock Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RestockProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: str, quantity: int) -> Product:
        """Add *quantity* units to a product's stock."""
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product {product_id} not found")

        product = product.increase_stock(quantity)
        await self._product_repo.save(product)
        logger.info("Product %s restocked to %d", product.id, product.stock)
        return product
