"""Order aggregate.

An order is a value snapshot of a cart taken at creation time. Later
changes to the cart never reach the order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType

from storefront.domain.model.cart import CartLine, ShoppingCart, lines_total
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_numbering import OrderIdGenerator

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    CREATED = "Created"
    PAID = "Paid"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"


@dataclass
class Order:
    """Snapshot of a cart plus a sequential id and a status label.

    Use ``Order.from_cart()`` to build one. Status transitions are plain
    label setters: any of ``pay``, ``ship`` and ``cancel`` may be called
    from any status and simply overwrite it.
    """

    id: int
    lines: Mapping[int, CartLine]
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.lines = MappingProxyType(dict(self.lines))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_cart(cart: ShoppingCart, ids: OrderIdGenerator) -> Order:
        order = Order(id=ids.next_id(), lines=cart.items_snapshot())
        logger.debug("Order #%d captured %d line(s)", order.id, len(order.lines))
        return order

    # --- State transitions ----------------------------------------------------

    def pay(self) -> None:
        self._set_status(OrderStatus.PAID)

    def ship(self) -> None:
        self._set_status(OrderStatus.SHIPPED)

    def cancel(self) -> None:
        self._set_status(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def items(self) -> Mapping[int, CartLine]:
        return self.lines

    def total(self) -> Money:
        return lines_total(self.lines.values())

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        rows = [f"Order#{self.id} ({self.status.value})"]
        rows.extend(f"  {line}" for line in self.lines.values())
        rows.append(f"Order Total: {self.total()}")
        return "\n".join(rows)

    # --- Internal helpers -----------------------------------------------------

    def _set_status(self, status: OrderStatus) -> None:
        logger.info("Order #%d: %s -> %s", self.id, self.status.value, status.value)
        self.status = status
