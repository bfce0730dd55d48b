"""Application service: Add Price use case (catalog maintenance)."""

from __future__ import annotations

import logging
from datetime import date

from lunches.application.dto import PriceDTO, price_to_dto
from lunches.domain.exceptions import NotFoundError
from lunches.domain.model.price import Price
from lunches.domain.model.value_objects import Money, parse_date
from lunches.domain.repository.price_catalog import PriceCatalog
from lunches.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddPriceHandler:

    def __init__(
        self,
        price_catalog: PriceCatalog,
        product_repo: ProductRepository,
        currency: str = "USD",
    ) -> None:
        self._price_catalog = price_catalog
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, product_id: str, day: str | date, amount: str) -> PriceDTO:
        """Price *product_id* on *day*.  A day can be priced only once."""
        if self._product_repo.get_by_id(product_id) is None:
            raise NotFoundError(f"Product #{product_id} not found")

        price = Price(
            product_id=product_id,
            date=parse_date(day),
            amount=Money.of(amount, self._currency),
        )
        self._price_catalog.add(price)
        logger.info("Priced product #%s at %s on %s", product_id, price.amount, price.date)
        return price_to_dto(price)
