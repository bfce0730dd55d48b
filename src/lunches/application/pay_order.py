"""Application service: Pay Order use case."""

from __future__ import annotations

import logging
from datetime import datetime

from lunches.application.dto import TransactionDTO, transaction_to_dto
from lunches.domain.exceptions import NotFoundError, StateTransitionError
from lunches.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PayOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, now: datetime) -> TransactionDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        try:
            transaction = order.pay(at=now)
        except StateTransitionError as exc:
            logger.warning("Order #%s: %s", order_id, exc)
            raise

        # Conditioned on the version read above; a concurrent payment loses.
        self._order_repo.save(order)
        logger.info("Order #%s paid (%s)", order_id, transaction.amount)
        return transaction_to_dto(transaction)
