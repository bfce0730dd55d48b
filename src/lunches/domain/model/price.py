"""Date-indexed prices.

A ``Price`` says what one product costs on one calendar day.  A
``PriceSet`` is the ordered result of a catalog query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.value_objects import Money


@dataclass(frozen=True)
class Price:
    product_id: str
    date: date
    amount: Money

    @property
    def key(self) -> tuple[str, date]:
        return self.product_id, self.date


class PriceSet:
    """Immutable collection of prices ordered by date, then product id.

    Invariant: at most one price per ``(product_id, date)``.
    """

    def __init__(self, prices: Iterable[Price] = ()) -> None:
        ordered = sorted(prices, key=lambda p: (p.date, p.product_id))
        seen: set[tuple[str, date]] = set()
        for price in ordered:
            if price.key in seen:
                raise ValidationError(
                    f"Duplicate price for product '{price.product_id}' "
                    f"on {price.date.isoformat()}"
                )
            seen.add(price.key)
        self._prices: tuple[Price, ...] = tuple(ordered)

    def __iter__(self) -> Iterator[Price]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __bool__(self) -> bool:
        return bool(self._prices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriceSet):
            return NotImplemented
        return self._prices == other._prices

    def __repr__(self) -> str:
        return f"PriceSet({list(self._prices)!r})"

    def for_product(self, product_id: str) -> Price | None:
        for price in self._prices:
            if price.product_id == product_id:
                return price
        return None
