"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lunches.domain.model.order import Order
from lunches.domain.model.order_filters import OrderFilters


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        The write is conditioned on the stored version still being
        ``order.version``; on success ``order.version`` is incremented.
        Raises ConflictError when another writer got there first.
        """

    @abstractmethod
    def get_list(self, filters: OrderFilters) -> list[Order]:
        """Return orders matching *filters*, ordered by shipment date then ID."""
