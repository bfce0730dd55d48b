"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from lunches.application.cancel_order import CancelOrderHandler
from lunches.application.change_address import ChangeAddressHandler
from lunches.application.create_order import CreateOrderHandler
from lunches.application.date_windows import default_order_window
from lunches.application.dto import OrderDTO, TransactionDTO
from lunches.application.list_orders import ListOrdersHandler
from lunches.application.pay_order import PayOrderHandler
from lunches.application.reject_order import RejectOrderHandler
from lunches.application.show_order import ShowOrderHandler
from lunches.domain.exceptions import DomainException
from lunches.domain.model.order_filters import OrderFilters
from lunches.domain.model.value_objects import DateRange, parse_date
from lunches.infrastructure.bootstrap import order_factory, order_repository


def _now() -> datetime:
    return datetime.now().astimezone()


def _fail(exc: DomainException) -> click.ClickException:
    if len(exc.errors) > 1:
        return click.ClickException("\n".join(["Invalid order:"] + [f"  - {e}" for e in exc.errors]))
    return click.ClickException(str(exc))


def _parse_items(raw: str) -> list[dict]:
    """Parse '1:2,3:1' (product ID : quantity) into raw item mappings."""
    items: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        items.append({"product": product_id.strip(), "quantity": qty})
    return items


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer}")
    click.echo(f"Delivery: {dto.shipment_date} to {dto.address}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total + ' ' + dto.currency:>20}")

    if dto.transactions:
        click.echo()
        for t in dto.transactions:
            reason = f"  ({t.reason})" if t.reason else ""
            click.echo(f"  {t.created_at}  {t.type:<13} {t.amount} {t.currency}{reason}")


def _display_transaction(order_id: int, dto: TransactionDTO) -> None:
    reason = f": {dto.reason}" if dto.reason else ""
    click.echo(f"Order #{order_id} {dto.type} of {dto.amount} {dto.currency} recorded{reason}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--shipment-date", required=True, help="Delivery day (YYYY-MM-DD).")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--pay", is_flag=True, default=False, help="Pay the order right away.")
def order_create(customer: str, shipment_date: str, address: str, items: str, pay: bool) -> None:
    """Place a new lunch order."""
    raw = {
        "customer": customer,
        "shipment_date": shipment_date,
        "address": address,
        "items": _parse_items(items),
    }

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        order_factory=order_factory(),
    )

    try:
        dto = handler.handle(raw, now=_now(), pay=pay)
    except DomainException as exc:
        raise _fail(exc)

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise _fail(exc)

    _display_order(dto)


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to pay.")
def order_pay(order_id: int) -> None:
    """Pay a created order."""
    handler = PayOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, now=_now())
    except DomainException as exc:
        raise _fail(exc)

    _display_transaction(order_id, dto)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.option("--reason", required=True, help="Why the order is cancelled.")
def order_cancel(order_id: int, reason: str) -> None:
    """Cancel a created or paid order."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, reason=reason, now=_now())
    except DomainException as exc:
        raise _fail(exc)

    _display_transaction(order_id, dto)


@click.command("reject")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to reject.")
@click.option("--reason", required=True, help="Why the order is rejected.")
def order_reject(order_id: int, reason: str) -> None:
    """Reject a created or paid order (operator override)."""
    handler = RejectOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, reason=reason, now=_now())
    except DomainException as exc:
        raise _fail(exc)

    _display_transaction(order_id, dto)


@click.command("address")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--address", required=True, help="New delivery address.")
def order_address(order_id: int, address: str) -> None:
    """Change the delivery address of an open order."""
    handler = ChangeAddressHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, address)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order #{dto.id} will be delivered to {dto.address}")


@click.command("list")
@click.option("--shipment-date", default=None, help="Exact delivery day (YYYY-MM-DD).")
@click.option("--start", default=None, help="Range start (YYYY-MM-DD).")
@click.option("--end", default=None, help="Range end (YYYY-MM-DD).")
@click.option("--customer", default=None, help="Only this customer's orders.")
@click.option("--paid/--unpaid", default=None, help="Only paid or only unpaid orders.")
@click.option(
    "--with-canceled", is_flag=True, default=False,
    help="Include cancelled orders in a customer listing.",
)
def order_list(
    shipment_date: str | None,
    start: str | None,
    end: str | None,
    customer: str | None,
    paid: bool | None,
    with_canceled: bool,
) -> None:
    """List orders; at least one of the date or customer filters is required.

    A customer listing without dates covers Monday last week to Friday
    next week, and leaves out cancelled orders unless --with-canceled is
    given.  Date listings always show every matching order.
    """
    customer = customer.strip() if customer else None
    try:
        date_range = DateRange.parse(start, end)
        if customer and date_range is None and shipment_date is None:
            date_range = default_order_window(_now().date())
        filters = OrderFilters(
            shipment_date=parse_date(shipment_date, "shipment date") if shipment_date else None,
            date_range=date_range,
            customer=customer,
            paid=paid,
            include_canceled=with_canceled if customer else True,
        )
        orders = ListOrdersHandler(order_repo=order_repository()).handle(filters)
    except DomainException as exc:
        raise _fail(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Customer':<20} {'Status':<10} {'Total':>12}")
    click.echo("-" * 64)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.shipment_date:<12} {dto.customer:<20} "
            f"{dto.status:<10} {dto.total + ' ' + dto.currency:>12}"
        )
