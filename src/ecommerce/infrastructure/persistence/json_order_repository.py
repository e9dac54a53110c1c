"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ecommerce.domain.model.order import Order, OrderLineItem, OrderStatus
from ecommerce.domain.model.value_objects import Money, Quantity
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for order in self._file.load_as(self._to_domain):
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return self._sorted(self._file.load_as(self._to_domain))

    def list_by_account(self, account_id: str) -> list[Order]:
        return [o for o in self.list_all() if o.account_id == account_id]

    def save(self, order: Order) -> None:
        # Reading the current orders, picking the id and writing the file
        # back all happen under one lock, so concurrent saves never share
        # an id or drop each other's order.
        with self._file.locked():
            stored = self._file.load_as(self._to_domain)
            if order.id is not None:
                order_id = order.id
            else:
                order_id = max((o.id for o in stored), default=0) + 1

            records = [self._to_raw(o, o.id) for o in stored if o.id != order_id]
            records.append(self._to_raw(order, order_id))
            self._file.persist(records)

        # Header and line items went out in one file replacement; the id is
        # only handed back once that has succeeded.
        order.id = order_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _sorted(orders: list[Order]) -> list[Order]:
        return sorted(orders, key=lambda o: o.id)

    @staticmethod
    def _to_raw(order: Order, order_id: int) -> dict:
        return {
            "id": order_id,
            "account_id": order.account_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=int(raw["id"]),
            account_id=raw["account_id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
