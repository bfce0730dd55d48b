"""Application service: Create Order use case.

Orchestrates the flow between the order factory and the repository.
With ``pay=True`` the new order is paid before it is first saved, the way
the ordering endpoint places an order in one step.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from lunches.application.dto import OrderDTO, order_to_dto
from lunches.domain.exceptions import DomainException
from lunches.domain.repository.order_repository import OrderRepository
from lunches.domain.service.order_factory import OrderFactory

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_factory: OrderFactory,
    ) -> None:
        self._order_repo = order_repo
        self._order_factory = order_factory

    def handle(self, raw: Mapping[str, Any], now: datetime, pay: bool = False) -> OrderDTO:
        """Create a new lunch order.

        Steps:
        1. Let the factory validate the input and price every item.
        2. Reserve an ID so transactions can reference the order.
        3. Optionally pay it.
        4. Persist and return a DTO.
        """
        try:
            order = self._order_factory.create_new_from_dict(raw, now)
        except DomainException as exc:
            logger.warning("Order rejected at creation: %s", exc)
            raise

        order.id = self._order_repo.next_id()
        if pay:
            order.pay(at=now)

        total = order.total
        self._order_repo.save(order)
        logger.info(
            "Order #%s created for %s on %s (total %s, status %s)",
            order.id,
            order.customer,
            order.shipment_date.isoformat(),
            total,
            order.status.value,
        )
        return order_to_dto(order)
