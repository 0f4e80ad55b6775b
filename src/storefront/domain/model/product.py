"""Product aggregate.

Products live independently of orders. Their stock goes down when an
order is placed and up when an admin restocks them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable: stock changes return a new ``Product`` so every state the
    aggregate passes through satisfies ``stock >= 0``.
    """

    id: str
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    def decrease_stock(self, quantity: int) -> Product:
        """Take *quantity* units out of stock.

        Raises InsufficientStockError if fewer than *quantity* units remain;
        the original instance is untouched either way.
        """
        if quantity < 0:
            raise ValidationError(f"Quantity cannot be negative, got {quantity}")
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(requested {quantity}, have {self.stock})"
            )
        return replace(self, stock=self.stock - quantity)

    def increase_stock(self, quantity: int) -> Product:
        # No upper bound.
        return replace(self, stock=self.stock + quantity)
