"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import Enum

from storefront.domain.exceptions import InvalidStateTransitionError, ValidationError
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderItem:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: str
    quantity: int
    price: Money  # locked at order-creation time

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Quantity must be positive")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


def new_order_id() -> str:
    """Millisecond timestamp, the id scheme the backend already expects."""
    return str(time.time_ns() // 1_000_000)


@dataclass(frozen=True)
class Order:
    """Aggregate root for customer orders.

    New orders start ``PENDING`` with no items. Every mutating method
    returns a new ``Order``; ``total_amount`` is derived from the line
    items so it can never disagree with them.
    """

    id: str
    customer_id: str
    status: OrderStatus = OrderStatus.PENDING
    items: tuple[OrderItem, ...] = ()

    def __post_init__(self) -> None:
        currencies = {item.price.currency for item in self.items}
        if len(currencies) > 1:
            raise ValidationError(
                f"Order items mix currencies: {', '.join(sorted(currencies))}"
            )

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: OrderItem) -> Order:
        return replace(self, items=self.items + (item,))

    def remove_item(self, product_id: str) -> Order:
        return replace(
            self,
            items=tuple(item for item in self.items if item.product_id != product_id),
        )

    # --- State transitions ----------------------------------------------------

    def process(self) -> Order:
        """Transition PENDING -> PROCESSING."""
        if self.status != OrderStatus.PENDING:
            raise InvalidStateTransitionError(
                f"Cannot process order — current status is {self.status.value}, "
                f"expected pending"
            )
        return replace(self, status=OrderStatus.PROCESSING)

    def complete(self) -> Order:
        """Transition PROCESSING -> COMPLETED."""
        if self.status != OrderStatus.PROCESSING:
            raise InvalidStateTransitionError(
                f"Cannot complete order — current status is {self.status.value}, "
                f"expected processing"
            )
        return replace(self, status=OrderStatus.COMPLETED)

    def cancel(self) -> Order:
        """Transition PENDING|PROCESSING -> CANCELLED."""
        if self.status == OrderStatus.COMPLETED:
            raise InvalidStateTransitionError("Cannot cancel a completed order")
        if self.status == OrderStatus.CANCELLED:
            raise InvalidStateTransitionError("Order is already cancelled")
        return replace(self, status=OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].price.currency)
        for item in self.items:
            result = result + item.line_total
        return result
