"""Unit tests for domain value objects."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from lunches.domain.exceptions import ValidationError
from lunches.domain.model.value_objects import DateRange, Money, Quantity, parse_date


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(3.5)

    def test_addition_is_exact(self):
        result = Money.of("0.10") + Money.of("0.20")
        assert result.amount == Decimal("0.30")

    def test_multiplication_by_int(self):
        result = Money.of("3.50") * 2
        assert result == Money.of("7.00")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("3.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("13")) == "13.00 USD"
        assert str(Money.of("9.5", "EUR")) == "9.50 EUR"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -1, -30])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity(value)

    @pytest.mark.parametrize("value", ["2", 1.0, True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity(value)


# ── Dates ────────────────────────────────────────────────────────────────────


class TestParseDate:

    def test_iso_string(self):
        assert parse_date("2026-10-20") == date(2026, 10, 20)

    def test_datetime_is_truncated(self):
        assert parse_date(datetime(2026, 10, 20, 13, 5)) == date(2026, 10, 20)

    def test_garbage_names_the_field(self):
        with pytest.raises(ValidationError, match="Invalid shipment_date"):
            parse_date("next tuesday", "shipment_date")


class TestDateRange:

    def test_start_after_end_rejected(self):
        with pytest.raises(ValidationError, match="is after end"):
            DateRange(date(2026, 10, 21), date(2026, 10, 20))

    def test_single_day_range_allowed(self):
        r = DateRange(date(2026, 10, 20), date(2026, 10, 20))
        assert r.contains(date(2026, 10, 20))

    def test_contains_is_inclusive(self):
        r = DateRange(date(2026, 10, 19), date(2026, 10, 23))
        assert r.contains(date(2026, 10, 19))
        assert r.contains(date(2026, 10, 21))
        assert r.contains(date(2026, 10, 23))
        assert not r.contains(date(2026, 10, 18))
        assert not r.contains(date(2026, 10, 24))

    def test_open_end_is_unbounded(self):
        r = DateRange(start=date(2026, 10, 19))
        assert r.contains(date(2030, 1, 1))
        assert not r.contains(date(2026, 10, 18))
        assert not r.is_bounded

    def test_require_bounded(self):
        with pytest.raises(ValidationError, match="both a start and an end"):
            DateRange(end=date(2026, 10, 19)).require_bounded()

    def test_parse_both_absent_is_no_range(self):
        assert DateRange.parse(None, "") is None

    def test_parse_strings(self):
        r = DateRange.parse("2026-10-19", "2026-10-23")
        assert r == DateRange(date(2026, 10, 19), date(2026, 10, 23))

    def test_parse_reversed_rejected(self):
        with pytest.raises(ValidationError):
            DateRange.parse("2026-10-23", "2026-10-19")
