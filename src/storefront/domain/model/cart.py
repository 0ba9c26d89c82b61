"""ShoppingCart aggregate.

The cart maps a product id to a line holding the shared product reference
and a quantity. It never rejects input: adding nothing, adding zero units
or removing an unknown product are silent no-ops.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace

from storefront.domain.model.product import Product, unit_price
from storefront.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


def _is_unit_count(qty: object) -> bool:
    return isinstance(qty, int) and not isinstance(qty, bool) and qty > 0


@dataclass(frozen=True)
class CartLine:
    """A product reference plus how many units of it are held."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return unit_price(self.product) * self.quantity.value

    def __str__(self) -> str:
        return f"x{self.quantity} {self.product}"


def lines_total(lines: Iterable[CartLine]) -> Money:
    """Sum of discounted unit price times quantity over *lines*.

    Shared by ``ShoppingCart.total`` and ``Order.total`` so the two can
    never disagree for the same contents.
    """
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result


def copy_lines(lines: Mapping[int, CartLine]) -> dict[int, CartLine]:
    """Value copy of a line mapping; lines are frozen and products stay shared."""
    return dict(lines)


class ShoppingCart:

    def __init__(self) -> None:
        self._items: dict[int, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add_product(self, product: Product | None, qty: int = 1) -> None:
        """Add *qty* units of *product*, merging with an existing line."""
        if product is None or not _is_unit_count(qty):
            logger.debug("Ignoring add of %r x%r", product, qty)
            return

        line = self._items.get(product.id)
        if line is None:
            self._items[product.id] = CartLine(product=product, quantity=Quantity(qty))
        else:
            self._items[product.id] = replace(line, quantity=line.quantity + qty)

    def remove_product(self, product_id: int, qty: int = 1) -> None:
        """Take *qty* units off; drop the line when nothing would remain."""
        line = self._items.get(product_id)
        if line is None:
            logger.debug("Ignoring removal of unknown product id=%s", product_id)
            return
        if not _is_unit_count(qty):
            logger.debug("Ignoring removal of %r unit(s) of product id=%s", qty, product_id)
            return

        if qty >= line.quantity.value:
            del self._items[product_id]
        else:
            self._items[product_id] = replace(line, quantity=Quantity(line.quantity.value - qty))

    def clear(self) -> None:
        self._items.clear()

    # --- Operators ------------------------------------------------------------

    def __iadd__(self, product: Product | None) -> ShoppingCart:
        self.add_product(product, 1)
        return self

    def __add__(self, product: Product | None) -> ShoppingCart:
        combined = self.copy()
        combined.add_product(product, 1)
        return combined

    # --- Queries --------------------------------------------------------------

    def copy(self) -> ShoppingCart:
        cart = ShoppingCart()
        cart._items = copy_lines(self._items)
        return cart

    def items_snapshot(self) -> dict[int, CartLine]:
        """Independent copy of the id -> line mapping."""
        return copy_lines(self._items)

    def quantity_of(self, product_id: int) -> int:
        line = self._items.get(product_id)
        return line.quantity.value if line is not None else 0

    def total(self) -> Money:
        return lines_total(self._items.values())

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self._items.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        rows = ["ShoppingCart:"]
        rows.extend(f"  {line}" for line in self._items.values())
        rows.append(f"Total: {self.total()}")
        return "\n".join(rows)
