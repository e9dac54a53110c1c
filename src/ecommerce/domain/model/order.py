"""Order aggregate, the core of the domain.

An Order owns its line items and is written as a single unit. Once the
store has assigned it an id it is never modified again.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"


@dataclass(frozen=True)
class OrderLineItem:
    """One product/quantity/price tuple within an order.

    ``unit_price`` is a copy of the product's price taken when the order
    was assembled. Later catalog price changes never reach it.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.create()`` for new orders. The plain ``__init__`` exists so
    the repository can reconstitute persisted orders as they were stored.
    """

    id: int | None
    account_id: str
    items: list[OrderLineItem]
    total_amount: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(account_id: str, items: Sequence[OrderLineItem]) -> Order:
        """Assemble a new PENDING order and compute its total."""
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=None,
            account_id=account_id,
            items=list(items),
            total_amount=sum_line_totals(items),
        )


def sum_line_totals(items: Sequence[OrderLineItem]) -> Money:
    """Exact sum of ``unit_price * quantity`` over *items*."""
    total = Money.zero(items[0].unit_price.currency) if items else Money.zero()
    for item in items:
        total = total + item.line_total
    return total
