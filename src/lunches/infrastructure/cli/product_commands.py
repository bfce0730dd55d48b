"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from lunches.application.add_product import AddProductHandler
from lunches.domain.exceptions import DomainException
from lunches.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
def product_add(name: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20}")
    click.echo("-" * 27)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20}")
