"""Application service: Quote Product use case (query).

Builds a throwaway product of the requested kind and reports how it
would be priced. Nothing is stored.
"""

from __future__ import annotations

from storefront.application.dto import PriceQuoteDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import (
    Clothing,
    Discountable,
    Electronics,
    Grocery,
    Product,
)
from storefront.domain.model.value_objects import Money

PRODUCT_KINDS = ("electronics", "clothing", "grocery")

# Quotes are not cart entries, so any id will do.
_QUOTE_PRODUCT_ID = 0


class QuoteProductHandler:

    def handle(
        self,
        kind: str,
        name: str,
        price: str,
        sku: str = "",
        size: str = "",
        on_clearance: bool = False,
        warranty_months: int = 0,
        expiry_date: str = "",
    ) -> PriceQuoteDTO:
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = self._build(
            kind=kind.lower(),
            name=name.strip(),
            price=Money.of(price),
            sku=sku,
            size=size,
            on_clearance=on_clearance,
            warranty_months=warranty_months,
            expiry_date=expiry_date,
        )

        return PriceQuoteDTO(
            type_label=product.type_label,
            name=product.name,
            base_price=str(product.price),
            final_price=str(product.final_price()),
            discounted=isinstance(product, Discountable),
            line=str(product),
        )

    @staticmethod
    def _build(
        kind: str,
        name: str,
        price: Money,
        sku: str,
        size: str,
        on_clearance: bool,
        warranty_months: int,
        expiry_date: str,
    ) -> Product:
        if kind == "electronics":
            return Electronics(_QUOTE_PRODUCT_ID, name, price, sku, warranty_months)
        if kind == "clothing":
            return Clothing(_QUOTE_PRODUCT_ID, name, price, sku, size, on_clearance)
        if kind == "grocery":
            return Grocery(_QUOTE_PRODUCT_ID, name, price, sku, expiry_date)
        raise ValidationError(
            f"Unknown product kind '{kind}'. Expected one of: {', '.join(PRODUCT_KINDS)}"
        )
