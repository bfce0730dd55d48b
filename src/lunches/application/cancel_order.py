"""Application service: Cancel Order use case.

Created and paid orders can be cancelled; a paid order records the refunded
total on its cancellation transaction.
"""

from __future__ import annotations

import logging
from datetime import datetime

from lunches.application.dto import TransactionDTO, transaction_to_dto
from lunches.domain.exceptions import DomainException, NotFoundError
from lunches.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, reason: str | None, now: datetime) -> TransactionDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        try:
            transaction = order.cancel(reason, at=now)
        except DomainException as exc:
            logger.warning("Order #%s not cancelled: %s", order_id, exc)
            raise

        self._order_repo.save(order)
        logger.info("Order #%s cancelled: %s", order_id, transaction.reason)
        return transaction_to_dto(transaction)
