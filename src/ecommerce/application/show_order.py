"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ecommerce.application.dto import OrderDTO
from ecommerce.application.presenter import order_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order_to_dto(order)
