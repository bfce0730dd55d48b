"""Abstract repository for date-indexed prices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from lunches.domain.exceptions import NotFoundError
from lunches.domain.model.price import Price, PriceSet
from lunches.domain.model.value_objects import DateRange


class PriceCatalog(ABC):

    @abstractmethod
    def find_by_date(self, day: date) -> PriceSet:
        """Return every price effective on *day* (possibly none)."""

    @abstractmethod
    def find_by_range(self, date_range: DateRange) -> PriceSet:
        """Return prices dated within *date_range*, inclusive, date-ascending.

        Implementations must reject a range that is open on either side.
        """

    @abstractmethod
    def add(self, price: Price) -> None:
        """Store a new price; a second price for the same product and day
        is a ValidationError."""

    def price_of(self, product_id: str, day: date) -> Price:
        price = self.find_by_date(day).for_product(product_id)
        if price is None:
            raise NotFoundError(
                f"No price for product '{product_id}' on {day.isoformat()}"
            )
        return price
