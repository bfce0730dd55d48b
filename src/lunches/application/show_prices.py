"""Application service: Show Prices use case (query)."""

from __future__ import annotations

from datetime import date

from lunches.application.dto import PriceDTO, price_to_dto
from lunches.domain.exceptions import ValidationError
from lunches.domain.model.value_objects import DateRange
from lunches.domain.repository.price_catalog import PriceCatalog


class ShowPricesHandler:

    def __init__(self, price_catalog: PriceCatalog) -> None:
        self._price_catalog = price_catalog

    def handle(
        self,
        day: date | None = None,
        date_range: DateRange | None = None,
    ) -> list[PriceDTO]:
        """Prices on one *day*, or every price within *date_range*."""
        if (day is None) == (date_range is None):
            raise ValidationError("Give either a date or a date range")

        if day is not None:
            prices = self._price_catalog.find_by_date(day)
        else:
            prices = self._price_catalog.find_by_range(date_range.require_bounded())
        return [price_to_dto(p) for p in prices]
