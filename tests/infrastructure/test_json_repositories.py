"""Tests for the JSON-file repositories (real files under tmp_path)."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from lunches.domain.exceptions import ConflictError, ValidationError
from lunches.domain.model.order import LineItem, Order, OrderStatus
from lunches.domain.model.order_filters import OrderFilters
from lunches.domain.model.price import Price
from lunches.domain.model.product import Product
from lunches.domain.model.value_objects import DateRange, Money, Quantity
from lunches.infrastructure.persistence.json_order_repository import JsonOrderRepository
from lunches.infrastructure.persistence.json_price_catalog import JsonPriceCatalog
from lunches.infrastructure.persistence.json_product_repository import JsonProductRepository

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
LATER = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)


def _order(day: date = date(2026, 10, 20), customer: str = "Alice") -> Order:
    return Order(
        id=None,
        customer=customer,
        shipment_date=day,
        address="Floor 3, desk 12",
        items=[
            LineItem("bread", "Bread", Quantity(2), Money.of("3.50")),
            LineItem("soup", "Soup", Quantity(1), Money.of("6.00")),
        ],
        created_at=NOW,
    )


class TestJsonOrderRepository:

    def test_creates_empty_store(self, tmp_path):
        JsonOrderRepository(tmp_path / "data" / "orders.json")
        assert (tmp_path / "data" / "orders.json").read_text(encoding="utf-8") == "[]"

    def test_round_trips_every_field(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        repo.save(order)
        order.pay(at=LATER)
        repo.save(order)

        order.cancel("changed mind", at=LATER)
        repo.save(order)

        loaded = JsonOrderRepository(tmp_path / "orders.json").get_by_id(order.id)
        assert loaded.id == 1
        assert loaded.version == 3
        assert loaded.customer == "Alice"
        assert loaded.shipment_date == date(2026, 10, 20)
        assert loaded.address == "Floor 3, desk 12"
        assert loaded.status == OrderStatus.CANCELED
        assert loaded.created_at == NOW
        assert loaded.items == order.items
        assert loaded.total.amount == Decimal("13.00")
        assert loaded.transactions == order.transactions
        assert loaded.transactions[1].reason == "changed mind"

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(42) is None

    def test_stale_save_raises_conflict(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        repo.save(order)

        first = repo.get_by_id(order.id)
        second = repo.get_by_id(order.id)
        first.pay(at=LATER)
        repo.save(first)

        second.reject("kitchen closed", at=LATER)
        with pytest.raises(ConflictError):
            repo.save(second)

        assert repo.get_by_id(order.id).status == OrderStatus.PAID
        assert second.version == 1  # untouched by the failed save

    def test_get_list(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        repo.save(_order(date(2026, 10, 22)))
        repo.save(_order(date(2026, 10, 20), customer="Bob"))
        repo.save(_order(date(2026, 10, 30)))

        in_week = repo.get_list(
            OrderFilters(date_range=DateRange(date(2026, 10, 19), date(2026, 10, 23)))
        )
        assert [o.shipment_date.day for o in in_week] == [20, 22]

        alice = repo.get_list(OrderFilters(customer="Alice"))
        assert [o.id for o in alice] == [1, 3]


class TestJsonPriceCatalog:

    def test_add_and_find(self, tmp_path):
        catalog = JsonPriceCatalog(tmp_path / "prices.json")
        catalog.add(Price("soup", date(2026, 10, 21), Money.of("6.20")))
        catalog.add(Price("bread", date(2026, 10, 20), Money.of("3.50")))

        reopened = JsonPriceCatalog(tmp_path / "prices.json")
        assert reopened.price_of("bread", date(2026, 10, 20)).amount == Money.of("3.50")
        assert len(reopened.find_by_date(date(2026, 10, 22))) == 0
        in_range = reopened.find_by_range(DateRange(date(2026, 10, 20), date(2026, 10, 21)))
        assert [p.product_id for p in in_range] == ["bread", "soup"]

    def test_duplicate_rejected(self, tmp_path):
        catalog = JsonPriceCatalog(tmp_path / "prices.json")
        catalog.add(Price("bread", date(2026, 10, 20), Money.of("3.50")))
        with pytest.raises(ValidationError, match="already has a price"):
            catalog.add(Price("bread", date(2026, 10, 20), Money.of("3.00")))


class TestJsonProductRepository:

    def test_save_and_load(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product("1", "Bread"))
        reopened = JsonProductRepository(tmp_path / "products.json")
        assert reopened.get_by_id("1") == Product("1", "Bread")
        assert reopened.get_by_id("2") is None
        assert len(reopened.list_all()) == 1
