"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ecommerce.infrastructure.config import Settings
from ecommerce.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from ecommerce.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ecommerce.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def account_repository(settings: Settings) -> JsonAccountRepository:
    return JsonAccountRepository(settings.accounts_file)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.products_file)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.orders_file)
