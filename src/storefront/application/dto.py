"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: how a single product would be priced."""

    type_label: str
    name: str
    base_price: str  # formatted, e.g. "699.99"
    final_price: str
    discounted: bool
    line: str  # the product's rendered form
