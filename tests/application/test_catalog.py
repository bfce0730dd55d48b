"""Integration tests for product and price maintenance and price queries."""

from datetime import date

import pytest

from lunches.application.add_price import AddPriceHandler
from lunches.application.add_product import AddProductHandler
from lunches.application.show_prices import ShowPricesHandler
from lunches.domain.exceptions import NotFoundError, ValidationError
from lunches.domain.model.product import Product
from lunches.domain.model.value_objects import DateRange
from tests.fakes import FakePriceCatalog, FakeProductRepository


def _setup() -> tuple[FakeProductRepository, FakePriceCatalog]:
    return FakeProductRepository([Product("1", "Bread"), Product("2", "Soup")]), FakePriceCatalog()


class TestAddProduct:

    def test_assigns_next_numeric_id(self):
        products, _ = _setup()
        product = AddProductHandler(products).handle("Salad")
        assert product.id == "3"
        assert products.get_by_id("3").name == "Salad"

    def test_duplicate_name_rejected(self):
        products, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(products).handle("bread")

    def test_blank_name_rejected(self):
        products, _ = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(products).handle("  ")


class TestAddPrice:

    def test_add_price(self):
        products, catalog = _setup()
        dto = AddPriceHandler(catalog, products).handle("1", "2026-10-20", "3.50")
        assert dto.amount == "3.50"
        assert dto.date == "2026-10-20"
        assert str(catalog.price_of("1", date(2026, 10, 20)).amount) == "3.50 USD"

    def test_currency_from_settings(self):
        products, catalog = _setup()
        dto = AddPriceHandler(catalog, products, currency="EUR").handle("1", "2026-10-20", "3.50")
        assert dto.currency == "EUR"

    def test_second_price_same_day_rejected(self):
        products, catalog = _setup()
        handler = AddPriceHandler(catalog, products)
        handler.handle("1", "2026-10-20", "3.50")
        with pytest.raises(ValidationError):
            handler.handle("1", "2026-10-20", "3.20")

    def test_unknown_product_rejected(self):
        products, catalog = _setup()
        with pytest.raises(NotFoundError, match="Product #9 not found"):
            AddPriceHandler(catalog, products).handle("9", "2026-10-20", "3.50")

    def test_negative_amount_rejected(self):
        products, catalog = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddPriceHandler(catalog, products).handle("1", "2026-10-20", "-1")


class TestShowPrices:

    def _seeded(self) -> ShowPricesHandler:
        products, catalog = _setup()
        add = AddPriceHandler(catalog, products)
        add.handle("2", "2026-10-21", "6.20")
        add.handle("1", "2026-10-20", "3.50")
        add.handle("2", "2026-10-20", "6.00")
        return ShowPricesHandler(catalog)

    def test_by_date(self):
        dtos = self._seeded().handle(day=date(2026, 10, 20))
        assert [(d.product_id, d.amount) for d in dtos] == [("1", "3.50"), ("2", "6.00")]

    def test_by_range(self):
        dtos = self._seeded().handle(date_range=DateRange(date(2026, 10, 20), date(2026, 10, 21)))
        assert [d.date for d in dtos] == ["2026-10-20", "2026-10-20", "2026-10-21"]

    def test_empty_range(self):
        assert self._seeded().handle(date_range=DateRange(date(2026, 11, 1), date(2026, 11, 5))) == []

    def test_needs_exactly_one_criterion(self):
        with pytest.raises(ValidationError, match="either a date or a date range"):
            self._seeded().handle()
        with pytest.raises(ValidationError, match="either a date or a date range"):
            self._seeded().handle(
                day=date(2026, 10, 20),
                date_range=DateRange(date(2026, 10, 20), date(2026, 10, 21)),
            )

    def test_open_range_rejected(self):
        with pytest.raises(ValidationError, match="both a start and an end"):
            self._seeded().handle(date_range=DateRange(start=date(2026, 10, 20)))
