"""Application service: Place Order use case.

Turns the current contents of a cart into an order. The cart itself is
left untouched; callers decide whether to clear it afterwards.
"""

from __future__ import annotations

import logging

from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.order import Order
from storefront.domain.service.order_numbering import OrderIdGenerator

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, id_generator: OrderIdGenerator) -> None:
        self._id_generator = id_generator

    def handle(self, cart: ShoppingCart) -> Order:
        order = Order.from_cart(cart, self._id_generator)
        logger.info("Placed order #%d (total %s)", order.id, order.total())
        return order
