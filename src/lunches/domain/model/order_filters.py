"""Criteria for listing orders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.order import Order, OrderStatus
from lunches.domain.model.value_objects import DateRange


@dataclass(frozen=True)
class OrderFilters:
    """Filters accepted by ``OrderRepository.get_list``.

    ``shipment_date``, ``date_range`` and ``customer`` narrow the scan;
    at least one of them must be given.  ``paid`` and ``include_canceled``
    only refine an already narrowed result.
    """

    shipment_date: date | None = None
    date_range: DateRange | None = None
    customer: str | None = None
    paid: bool | None = None
    include_canceled: bool = True

    @property
    def is_empty(self) -> bool:
        return (
            self.shipment_date is None
            and self.date_range is None
            and not self._customer_key
        )

    @property
    def _customer_key(self) -> str:
        return (self.customer or "").strip().lower()

    def require_any(self) -> OrderFilters:
        if self.is_empty:
            raise ValidationError(
                "No filter provided: give a shipment date, a date range or a customer"
            )
        return self

    def matches(self, order: Order) -> bool:
        if self.shipment_date is not None and order.shipment_date != self.shipment_date:
            return False
        if self.date_range is not None and not self.date_range.contains(order.shipment_date):
            return False
        if self._customer_key and order.customer.lower() != self._customer_key:
            return False
        if self.paid is not None and order.is_paid != self.paid:
            return False
        if not self.include_canceled and order.status == OrderStatus.CANCELED:
            return False
        return True
