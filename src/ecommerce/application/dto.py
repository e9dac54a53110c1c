"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the transport and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the buyer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item, priced at its snapshot."""

    product_id: str
    product_name: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete persisted order."""

    id: int
    account_id: str
    created_at: datetime
    total_amount: Decimal
    status: str
    items: list[OrderLineItemDTO]


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: Decimal
    image_url: str | None


@dataclass(frozen=True)
class AccountDTO:
    """Output: an account. The credential hash is never exposed."""

    id: str
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class ProductPage:
    items: list[ProductDTO]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.size) if self.size else 0
