"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from lunches.domain.exceptions import ConflictError
from lunches.domain.model.order import LineItem, Order, OrderStatus
from lunches.domain.model.order_filters import OrderFilters
from lunches.domain.model.transaction import Transaction, TransactionType
from lunches.domain.model.value_objects import Money, Quantity
from lunches.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        stored_version = 0
        position = None
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                stored_version = raw.get("version", 0)
                position = i
                break

        # Compare-and-swap on the version the order was loaded with.
        if stored_version != order.version:
            logger.warning(
                "Order #%s changed concurrently (loaded v%s, stored v%s)",
                order.id,
                order.version,
                stored_version,
            )
            raise ConflictError(
                f"Order #{order.id} was modified by someone else; reload and retry"
            )

        new_version = order.version + 1
        raw_order = self._to_raw(order, new_version)
        if position is None:
            orders.append(raw_order)
        else:
            orders[position] = raw_order

        self._persist_raw(orders)
        order.version = new_version

    def get_list(self, filters: OrderFilters) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._load_raw()]
        matching = [o for o in orders if filters.matches(o)]
        return sorted(matching, key=lambda o: (o.shipment_date, o.id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, version: int) -> dict:
        return {
            "id": order.id,
            "version": version,
            "customer": order.customer,
            "shipment_date": order.shipment_date.isoformat(),
            "address": order.address,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
            "transactions": [
                {
                    "type": t.type.value,
                    "amount": str(t.amount.amount),
                    "currency": t.amount.currency,
                    "reason": t.reason,
                    "created_at": t.created_at.isoformat(),
                }
                for t in order.transactions
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            LineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        transactions = [
            Transaction(
                order_id=raw["id"],
                type=TransactionType(t["type"]),
                amount=Money(Decimal(t["amount"]), t.get("currency", "USD")),
                reason=t.get("reason"),
                created_at=datetime.fromisoformat(t["created_at"]),
            )
            for t in raw.get("transactions", [])
        ]
        return Order(
            id=raw["id"],
            customer=raw["customer"],
            shipment_date=date.fromisoformat(raw["shipment_date"]),
            address=raw["address"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            transactions=transactions,
            version=raw.get("version", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
