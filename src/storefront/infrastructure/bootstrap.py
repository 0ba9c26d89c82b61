"""Composition root — builds the objects the CLI commands work with.

This is the only place that constructs concrete products and the order
id generator. Every command asks for fresh instances, so no state is
shared between invocations.
"""

from __future__ import annotations

from storefront.domain.model.catalog import GenericCatalog
from storefront.domain.model.product import Clothing, Electronics, Grocery, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_numbering import OrderIdGenerator

FIRST_ORDER_ID = 1


def sample_products() -> list[Product]:
    return [
        Electronics(1, "Smartphone", Money.of("699.99"), "ELEC-100", warranty_months=12),
        Clothing(2, "Leather Jacket", Money.of("250.00"), "CLOTH-200", size="L", on_clearance=False),
        Grocery(3, "Organic Milk", Money.of("3.49"), "GROC-300", expiry_date="2025-12-01"),
    ]


def sample_catalog(products: list[Product] | None = None) -> GenericCatalog[Product]:
    catalog: GenericCatalog[Product] = GenericCatalog()
    for product in products if products is not None else sample_products():
        catalog.add(product)
    return catalog


def order_id_generator() -> OrderIdGenerator:
    return OrderIdGenerator(start=FIRST_ORDER_ID)
