"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in ascending ID order."""

    @abstractmethod
    def list_by_account(self, account_id: str) -> list[Order]:
        """Return the orders owned by *account_id*, in ascending ID order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order and all of its line items as one unit.

        Assigns ``order.id`` when it is None. Raises StorageError if the
        write cannot be completed, in which case nothing is persisted.
        """
