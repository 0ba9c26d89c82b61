"""CLI command that walks through the fixed demonstration scenario."""

from __future__ import annotations

import click

from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.product import Discountable
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import (
    order_id_generator,
    sample_catalog,
    sample_products,
)


def _plain(money: Money) -> str:
    """Shortest exact form of an amount: 629.991, 237.5, 250."""
    return f"{money.amount.normalize():f}"


@click.command("demo")
def demo() -> None:
    """Run the scripted product / cart / order walkthrough."""
    products = sample_products()
    smartphone, jacket, milk = products

    # Products and their renderings
    for product in products:
        click.echo(product)
    click.echo()

    for product in (smartphone, jacket):
        click.echo(
            f"Base price of {product.name}: {_plain(product.price)}"
            f" | Final price (after discount): {_plain(product.final_price())}"
        )
    click.echo()

    # In-place and copying cart operators
    cart = ShoppingCart()
    cart += smartphone
    cart = cart + jacket
    cart += milk
    click.echo(cart)
    click.echo()

    # Discount capability, where a product has one
    for product in products:
        if isinstance(product, Discountable):
            price = product.apply_discount(product.price)
        else:
            price = product.price
        click.echo(f"{product.name} -> Final Price: {_plain(price)}")
    click.echo()

    catalog = sample_catalog(products)
    click.echo(f"Catalog contains {catalog.size()} items:")
    for item in catalog:
        click.echo(f"  {item}")
    click.echo()

    # Cart -> order, then keep working on the cart
    click.echo(f"Cart total: {_plain(cart.total())}")

    order = PlaceOrderHandler(id_generator=order_id_generator()).handle(cart)
    click.echo("Order created:")
    click.echo(order)

    order.pay()
    click.echo("After payment:")
    click.echo(order)

    click.echo(f"Removing product ID={jacket.id} ({jacket.name}) from cart...")
    cart.remove_product(jacket.id, 1)
    click.echo(cart)

    click.echo("Attempting to remove invalid product ID=999...")
    cart.remove_product(999, 1)
    click.echo("Cart still contains:")
    click.echo(cart)

    cart.clear()
    click.echo(f"Cart cleared. Empty? {str(cart.empty()).lower()}")
