import logging

import click

from storefront.infrastructure.cli.catalog_commands import catalog, quote
from storefront.infrastructure.cli.demo_commands import demo


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log domain events to stderr.")
def cli(verbose: bool) -> None:
    """Storefront — products, carts and orders"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(catalog)
cli.add_command(demo)
cli.add_command(quote)
