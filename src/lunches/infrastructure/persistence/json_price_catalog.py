"""JSON-file-backed implementation of PriceCatalog."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.price import Price, PriceSet
from lunches.domain.model.value_objects import DateRange, Money
from lunches.domain.repository.price_catalog import PriceCatalog


class JsonPriceCatalog(PriceCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PriceCatalog interface -----------------------------------------------

    def find_by_date(self, day: date) -> PriceSet:
        return PriceSet(p for p in self._load() if p.date == day)

    def find_by_range(self, date_range: DateRange) -> PriceSet:
        date_range.require_bounded()
        return PriceSet(p for p in self._load() if date_range.contains(p.date))

    def add(self, price: Price) -> None:
        prices = self._load()
        if any(p.key == price.key for p in prices):
            raise ValidationError(
                f"Product '{price.product_id}' already has a price "
                f"on {price.date.isoformat()}"
            )
        prices.append(price)
        self._persist(prices)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Price]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [
            Price(
                product_id=item["product_id"],
                date=date.fromisoformat(item["date"]),
                amount=Money(Decimal(item["amount"]), item.get("currency", "USD")),
            )
            for item in raw
        ]

    def _persist(self, prices: list[Price]) -> None:
        raw = [
            {
                "product_id": p.product_id,
                "date": p.date.isoformat(),
                "amount": str(p.amount.amount),
                "currency": p.amount.currency,
            }
            for p in sorted(prices, key=lambda p: (p.date, p.product_id))
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
