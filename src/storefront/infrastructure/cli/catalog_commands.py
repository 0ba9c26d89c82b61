"""CLI commands for browsing and pricing products."""

from __future__ import annotations

import click

from storefront.application.quote_product import PRODUCT_KINDS, QuoteProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import sample_catalog


@click.command("catalog")
def catalog() -> None:
    """List the sample catalog."""
    items = sample_catalog()

    if not items.size():
        click.echo("Catalog is empty.")
        return

    click.echo(f"{'ID':<6} {'Type':<12} {'Name':<20} {'Base':>10} {'Final':>10}")
    click.echo("-" * 62)
    for p in items:
        click.echo(
            f"{p.id:<6} {p.type_label:<12} {p.name:<20} {str(p.price):>10} {str(p.final_price()):>10}"
        )


@click.command("quote")
@click.option("--kind", required=True, type=click.Choice(PRODUCT_KINDS, case_sensitive=False), help="Product kind.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price (e.g. 699.99).")
@click.option("--sku", default="", help="Stock-keeping identifier.")
@click.option("--size", default="", help="Clothing size.")
@click.option("--clearance", is_flag=True, default=False, help="Clothing is on clearance.")
@click.option("--warranty-months", type=int, default=0, help="Electronics warranty.")
@click.option("--expiry", default="", help="Grocery expiry date.")
def quote(
    kind: str,
    name: str,
    price: str,
    sku: str,
    size: str,
    clearance: bool,
    warranty_months: int,
    expiry: str,
) -> None:
    """Show how a product would be priced."""
    handler = QuoteProductHandler()

    try:
        dto = handler.handle(
            kind=kind,
            name=name,
            price=price,
            sku=sku,
            size=size,
            on_clearance=clearance,
            warranty_months=warranty_months,
            expiry_date=expiry,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.line)
    if dto.discounted:
        click.echo(f"Base price: {dto.base_price}  Final price: {dto.final_price}")
    else:
        click.echo(f"Base price: {dto.base_price}  (no discount)")
