"""Application service: Change Address use case."""

from __future__ import annotations

import logging

from lunches.application.dto import OrderDTO, order_to_dto
from lunches.domain.exceptions import NotFoundError
from lunches.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ChangeAddressHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, address: str | None) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        order.change_address(address)
        self._order_repo.save(order)
        logger.info("Order #%s delivery address changed", order_id)
        return order_to_dto(order)
