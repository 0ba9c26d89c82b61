"""Product variants and the discount capability.

Every product carries an id, a name, a base price and a SKU. The three
variants differ in one extra attribute and in how the final price is
derived. Electronics and Clothing implement the ``Discountable``
capability; Grocery does not and always sells at its base price.

Products are shared by reference between carts, orders and catalogs, so
they are frozen once constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Protocol, runtime_checkable

from storefront.domain.model.value_objects import Money

ELECTRONICS_RATE = Decimal("0.90")
CLOTHING_RATE = Decimal("0.95")
CLOTHING_CLEARANCE_RATE = Decimal("0.70")


@runtime_checkable
class Discountable(Protocol):
    """A product that knows how to reduce a base price."""

    def apply_discount(self, price: Money) -> Money: ...


@dataclass(frozen=True)
class Product:
    """Base product: identity, name, base price and SKU.

    ``id`` is assigned by the caller and is never checked for uniqueness.
    """

    type_label: ClassVar[str] = "Product"

    id: int
    name: str
    price: Money
    sku: str

    def final_price(self) -> Money:
        return self.price

    def _details(self) -> str:
        return f"SKU:{self.sku}"

    def __str__(self) -> str:
        return f"[{self.type_label}] {self.name} ({self._details()}) : {self.final_price()}"


@dataclass(frozen=True)
class Electronics(Product):
    """Flat 10% promotional discount.

    ``warranty_months`` is stored but not part of the rendered line.
    """

    type_label: ClassVar[str] = "Electronics"

    warranty_months: int

    def apply_discount(self, price: Money) -> Money:
        return price.discounted(ELECTRONICS_RATE)

    def final_price(self) -> Money:
        return self.apply_discount(self.price)


@dataclass(frozen=True)
class Clothing(Product):
    """30% off on clearance, 5% off otherwise."""

    type_label: ClassVar[str] = "Clothing"

    size: str
    on_clearance: bool = False

    def apply_discount(self, price: Money) -> Money:
        if self.on_clearance:
            return price.discounted(CLOTHING_CLEARANCE_RATE)
        return price.discounted(CLOTHING_RATE)

    def final_price(self) -> Money:
        return self.apply_discount(self.price)

    def _details(self) -> str:
        return f"Size:{self.size}, SKU:{self.sku}"


@dataclass(frozen=True)
class Grocery(Product):
    type_label: ClassVar[str] = "Grocery"

    expiry_date: str  # opaque, never parsed

    def _details(self) -> str:
        return f"exp:{self.expiry_date}, SKU:{self.sku}"


def unit_price(product: Product) -> Money:
    """Per-unit price used by cart and order totals.

    Discountable products go through ``apply_discount``; anything else
    sells at its base price.
    """
    if isinstance(product, Discountable):
        return product.apply_discount(product.price)
    return product.price
