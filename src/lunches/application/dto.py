"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is rendered as a
plain decimal string and dates as ISO strings, so nothing is lost.
"""

from __future__ import annotations

from dataclasses import dataclass

from lunches.domain.model.order import Order
from lunches.domain.model.price import Price
from lunches.domain.model.transaction import Transaction


@dataclass(frozen=True)
class LineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # e.g. "3.50"
    line_total: str


@dataclass(frozen=True)
class TransactionDTO:
    order_id: int | None
    type: str
    amount: str
    currency: str
    reason: str | None
    created_at: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order, every field of the aggregate."""

    id: int
    customer: str
    status: str
    shipment_date: str
    address: str
    items: list[LineItemDTO]
    total: str
    currency: str
    transactions: list[TransactionDTO]
    created_at: str
    version: int


@dataclass(frozen=True)
class PriceDTO:
    product_id: str
    date: str
    amount: str
    currency: str


# --- Mapping ------------------------------------------------------------------


def transaction_to_dto(transaction: Transaction) -> TransactionDTO:
    return TransactionDTO(
        order_id=transaction.order_id,
        type=transaction.type.value,
        amount=str(transaction.amount.amount),
        currency=transaction.amount.currency,
        reason=transaction.reason,
        created_at=transaction.created_at.isoformat(),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer=order.customer,
        status=order.status.value,
        shipment_date=order.shipment_date.isoformat(),
        address=order.address,
        items=[
            LineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price.amount),
                line_total=str(item.line_total.amount),
            )
            for item in order.items
        ],
        total=str(order.total.amount),
        currency=order.total.currency,
        transactions=[transaction_to_dto(t) for t in order.transactions],
        created_at=order.created_at.isoformat(),
        version=order.version,
    )


def price_to_dto(price: Price) -> PriceDTO:
    return PriceDTO(
        product_id=price.product_id,
        date=price.date.isoformat(),
        amount=str(price.amount.amount),
        currency=price.amount.currency,
    )
