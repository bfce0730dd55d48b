import click

from lunches.infrastructure.cli.order_commands import (
    order_address,
    order_cancel,
    order_create,
    order_list,
    order_pay,
    order_reject,
    order_show,
)
from lunches.infrastructure.cli.price_commands import price_add, price_list
from lunches.infrastructure.cli.product_commands import product_add, product_list
from lunches.infrastructure.config import get_settings
from lunches.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override LUNCHES_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Lunches: corporate lunch ordering"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def price() -> None:
    """Manage the price catalog."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_address)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_reject)
order.add_command(order_show)
price.add_command(price_add)
price.add_command(price_list)
product.add_command(product_add)
product.add_command(product_list)
