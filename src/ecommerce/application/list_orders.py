"""Application service: order listing queries."""

from __future__ import annotations

from ecommerce.application.dto import OrderDTO
from ecommerce.application.presenter import order_to_dto
from ecommerce.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.list_all()]


class ListAccountOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, account_id: str) -> list[OrderDTO]:
        """Orders owned by *account_id*.

        The account itself is not looked up; an unknown account simply
        has no orders.
        """
        return [
            order_to_dto(order)
            for order in self._order_repo.list_by_account(account_id)
        ]
