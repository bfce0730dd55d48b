"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items and its
transaction ledger.  All status rules are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from lunches.domain.exceptions import (
    LineItemError,
    NotFoundError,
    StateTransitionError,
    ValidationError,
)
from lunches.domain.model.product import Product
from lunches.domain.model.transaction import Transaction, TransactionType
from lunches.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from lunches.domain.repository.price_catalog import PriceCatalog


class OrderStatus(Enum):
    CREATED = "created"
    PAID = "paid"
    CANCELED = "canceled"
    REJECTED = "rejected"


@dataclass
class LineItem:
    """One priced product line.

    The unit price is the catalog price on the shipment date, captured when
    the order is created; later catalog changes do not touch it.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @classmethod
    def priced(
        cls,
        product: Product,
        quantity: int,
        shipment_date: date,
        catalog: PriceCatalog,
    ) -> LineItem:
        """Build a line item priced from *catalog* on *shipment_date*.

        Raises ValidationError for a bad quantity and LineItemError when the
        product has no price on that day.
        """
        qty = Quantity(quantity)
        try:
            price = catalog.price_of(product.id, shipment_date)
        except NotFoundError as exc:
            raise LineItemError(
                f"No price for {product.name} on {shipment_date.isoformat()}"
            ) from exc
        return cls(
            product_id=product.id,
            product_name=product.name,
            quantity=qty,
            unit_price=price.amount,
        )


# Statuses from which each operation may start.
_ALLOWED_FROM: dict[str, tuple[OrderStatus, ...]] = {
    "pay": (OrderStatus.CREATED,),
    "cancel": (OrderStatus.CREATED, OrderStatus.PAID),
    "reject": (OrderStatus.CREATED, OrderStatus.PAID),
    "change the address of": (OrderStatus.CREATED, OrderStatus.PAID),
}


@dataclass
class Order:
    """Aggregate root for lunch orders.

    Use ``OrderFactory`` for new orders; it validates raw input and prices
    the items.  The ``__init__`` is intentionally simple so the repository
    can reconstitute persisted orders without re-validating.

    ``version`` is the optimistic-concurrency token checked by the
    repository on every save.
    """

    id: int | None
    customer: str
    shipment_date: date
    address: str
    items: list[LineItem]
    created_at: datetime
    status: OrderStatus = OrderStatus.CREATED
    transactions: list[Transaction] = field(default_factory=list)
    version: int = 0

    # --- State transitions ----------------------------------------------------

    def pay(self, at: datetime) -> Transaction:
        """Transition created -> paid, recording a payment of the full total."""
        self._assert_can("pay")
        transaction = Transaction(
            order_id=self.id,
            type=TransactionType.PAYMENT,
            amount=self.total,
            created_at=at,
        )
        self.status = OrderStatus.PAID
        self.transactions.append(transaction)
        return transaction

    def cancel(self, reason: str | None, at: datetime) -> Transaction:
        """Transition created|paid -> canceled."""
        return self._close("cancel", OrderStatus.CANCELED, TransactionType.CANCELLATION, reason, at)

    def reject(self, reason: str | None, at: datetime) -> Transaction:
        """Transition created|paid -> rejected (operator override)."""
        return self._close("reject", OrderStatus.REJECTED, TransactionType.REJECTION, reason, at)

    def change_address(self, address: str | None) -> None:
        self._assert_can("change the address of")
        if not isinstance(address, str) or not address.strip():
            raise ValidationError("Address is required")
        self.address = address.strip()

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        if not self.items:
            return Money.zero()
        result = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    # --- Internal helpers -----------------------------------------------------

    def _close(
        self,
        operation: str,
        new_status: OrderStatus,
        kind: TransactionType,
        reason: str | None,
        at: datetime,
    ) -> Transaction:
        self._assert_can(operation)
        if not isinstance(reason, str) or not reason.strip():
            raise ValidationError(f"A reason is required to {operation} an order")

        # Only money that was actually taken is given back.
        refund = self.total if self.is_paid else Money.zero(self.total.currency)
        transaction = Transaction(
            order_id=self.id,
            type=kind,
            amount=refund,
            created_at=at,
            reason=reason.strip(),
        )
        self.status = new_status
        self.transactions.append(transaction)
        return transaction

    def _assert_can(self, operation: str) -> None:
        if self.status not in _ALLOWED_FROM[operation]:
            raise StateTransitionError(
                f"Cannot {operation} a {self.status.value} order"
            )
