"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from lunches.domain.service.order_factory import OrderFactory
from lunches.infrastructure.config import get_settings
from lunches.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from lunches.infrastructure.persistence.json_price_catalog import (
    JsonPriceCatalog,
)
from lunches.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def price_catalog() -> JsonPriceCatalog:
    return JsonPriceCatalog(get_settings().data_dir / "prices.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def order_factory() -> OrderFactory:
    return OrderFactory(product_repo=product_repository(), price_catalog=price_catalog())
