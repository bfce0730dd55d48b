"""Domain service: Order Factory.

The single validated entry point for turning untrusted client input into a
priced Order.  It needs two aggregates besides the order itself (products
and prices), which is why it lives in a service rather than on ``Order``.

Error policy: order-level fields fail fast on the first problem; line items
are all attempted and every problem is reported together.  An order is
never created partially priced.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from lunches.domain.exceptions import DomainException, LineItemError, ValidationError
from lunches.domain.model.order import LineItem, Order, OrderStatus
from lunches.domain.model.value_objects import parse_date
from lunches.domain.repository.price_catalog import PriceCatalog
from lunches.domain.repository.product_repository import ProductRepository


class OrderFactory:

    def __init__(
        self,
        product_repo: ProductRepository,
        price_catalog: PriceCatalog,
    ) -> None:
        self._product_repo = product_repo
        self._price_catalog = price_catalog

    def create_new_from_dict(self, raw: Mapping[str, Any], now: datetime) -> Order:
        """Validate *raw* and build a new, unsaved order.

        Expected keys: ``customer``, ``shipment_date`` (``YYYY-MM-DD``),
        ``address`` and ``items``, a list of ``{"product": id, "quantity": n}``.
        *now* anchors the "shipment date is not in the past" rule and the
        order's ``created_at``.
        """
        if not isinstance(raw, Mapping):
            raise ValidationError("Order data must be a mapping")

        customer = self._required_text(raw, "customer")

        if raw.get("shipment_date") in (None, ""):
            raise ValidationError("Field 'shipment_date' is required")
        shipment_date = parse_date(raw["shipment_date"], "shipment_date")
        if shipment_date < now.date():
            raise ValidationError(
                f"Invalid shipment_date: {shipment_date.isoformat()} is in the past"
            )

        address = self._required_text(raw, "address")

        raw_items = raw.get("items")
        if not isinstance(raw_items, list) or not raw_items:
            raise ValidationError("Field 'items' must be a non-empty list")

        items = self._build_items(raw_items, shipment_date)

        return Order(
            id=None,
            customer=customer,
            shipment_date=shipment_date,
            address=address,
            items=items,
            created_at=now,
            status=OrderStatus.CREATED,
        )

    # --- Internal helpers -----------------------------------------------------

    def _build_items(self, raw_items: list[Any], shipment_date: date) -> list[LineItem]:
        items: list[LineItem] = []
        failures: list[DomainException] = []

        for position, entry in enumerate(raw_items, start=1):
            try:
                item = self._build_item(entry, shipment_date, position)
            except (ValidationError, LineItemError) as exc:
                failures.append(exc)
                continue
            # An order is settled in a single currency, the first priced line's.
            if items and item.unit_price.currency != items[0].unit_price.currency:
                failures.append(LineItemError(
                    f"{item.product_name} is priced in {item.unit_price.currency}, "
                    f"not {items[0].unit_price.currency}"
                ))
                continue
            items.append(item)

        if failures:
            messages = [str(exc) for exc in failures]
            summary = "; ".join(messages)
            if all(isinstance(exc, LineItemError) for exc in failures):
                raise LineItemError(summary, errors=messages)
            raise ValidationError(summary, errors=messages)

        return items

    def _build_item(self, entry: Any, shipment_date: date, position: int) -> LineItem:
        if not isinstance(entry, Mapping):
            raise ValidationError(f"Item #{position} must be a mapping")

        product_id = entry.get("product")
        if product_id in (None, ""):
            raise ValidationError(f"Item #{position}: field 'product' is required")

        quantity = self._coerce_quantity(entry.get("quantity"))

        product = self._product_repo.get_by_id(str(product_id))
        if product is None:
            raise LineItemError(f"Unknown product '{product_id}'")

        return LineItem.priced(product, quantity, shipment_date, self._price_catalog)

    @staticmethod
    def _coerce_quantity(value: Any) -> Any:
        # Form-encoded payloads deliver numbers as strings.
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value.strip())
        return value

    @staticmethod
    def _required_text(raw: Mapping[str, Any], field_name: str) -> str:
        value = raw.get(field_name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Field '{field_name}' is required")
        return value.strip()
