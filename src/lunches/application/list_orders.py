"""Application service: List Orders use case (query).

Unfiltered listing is refused so a caller can never trigger a scan of
every order ever placed.
"""

from __future__ import annotations

from lunches.application.dto import OrderDTO, order_to_dto
from lunches.domain.model.order_filters import OrderFilters
from lunches.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, filters: OrderFilters) -> list[OrderDTO]:
        filters.require_any()
        return [order_to_dto(order) for order in self._order_repo.get_list(filters)]
