"""CLI commands for the price catalog."""

from __future__ import annotations

import click

from lunches.application.add_price import AddPriceHandler
from lunches.application.show_prices import ShowPricesHandler
from lunches.domain.exceptions import DomainException
from lunches.domain.model.value_objects import DateRange, parse_date
from lunches.infrastructure.bootstrap import price_catalog, product_repository
from lunches.infrastructure.config import get_settings


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--date", "day", required=True, help="Day the price applies to (YYYY-MM-DD).")
@click.option("--amount", required=True, help="Price (e.g. 3.50).")
def price_add(product_id: str, day: str, amount: str) -> None:
    """Price a product for one day."""
    handler = AddPriceHandler(
        price_catalog=price_catalog(),
        product_repo=product_repository(),
        currency=get_settings().currency,
    )

    try:
        dto = handler.handle(product_id=product_id, day=day, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.product_id} costs {dto.amount} {dto.currency} on {dto.date}")


@click.command("list")
@click.option("--date", "day", default=None, help="Show prices on this day.")
@click.option("--start", default=None, help="Range start (YYYY-MM-DD).")
@click.option("--end", default=None, help="Range end (YYYY-MM-DD).")
def price_list(day: str | None, start: str | None, end: str | None) -> None:
    """Show prices for one day or a date range."""
    handler = ShowPricesHandler(price_catalog=price_catalog())

    try:
        prices = handler.handle(
            day=parse_date(day) if day else None,
            date_range=DateRange.parse(start, end),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not prices:
        click.echo("No prices found.")
        return

    click.echo(f"{'Date':<12} {'Product':<8} {'Price':>12}")
    click.echo("-" * 34)
    for p in prices:
        click.echo(f"{p.date:<12} {p.product_id:<8} {p.amount + ' ' + p.currency:>12}")
