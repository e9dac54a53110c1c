"""Application service: Create Order use case.

Orchestrates account lookup, product lookup and the Order aggregate.
This is the only place that coordinates multiple aggregates.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from ecommerce.application.dto import OrderDTO, OrderItemSpec
from ecommerce.application.presenter import order_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError, StorageError, ValidationError
from ecommerce.domain.model.order import Order, OrderLineItem
from ecommerce.domain.model.value_objects import Quantity
from ecommerce.domain.repository.account_repository import AccountRepository
from ecommerce.domain.repository.order_repository import OrderRepository
from ecommerce.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._account_repo = account_repo

    def handle(self, account_id: str, item_specs: Sequence[OrderItemSpec]) -> OrderDTO:
        """Create a new PENDING order for *account_id*.

        Steps:
        1. Resolve the account (fail if not found).
        2. Validate the requested quantities.
        3. Resolve each product and copy its *current* price into a line item.
        4. Let the Order aggregate compute the total.
        5. Persist the whole order in one write and return a DTO.

        Every failure in steps 1-4 happens before anything is written.
        """
        log = logger.bind(account_id=account_id, item_count=len(item_specs))

        account = self._account_repo.get_by_id(account_id)
        if account is None:
            log.warning("order_rejected", reason="account_not_found")
            raise EntityNotFoundError("Account", account_id)

        if not item_specs:
            log.warning("order_rejected", reason="no_items")
            raise ValidationError("Order must contain at least one item")
        quantities = [Quantity(spec.quantity) for spec in item_specs]

        line_items: list[OrderLineItem] = []
        for spec, quantity in zip(item_specs, quantities):
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                log.warning(
                    "order_rejected",
                    reason="product_not_found",
                    product_id=spec.product_id,
                )
                raise EntityNotFoundError("Product", spec.product_id)

            line_items.append(
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=product.price,  # Money is frozen: a value copy
                )
            )

        order = Order.create(account_id=account.id, items=line_items)

        try:
            self._order_repo.save(order)
        except StorageError:
            log.error("order_store_failed")
            raise

        log.info(
            "order_created",
            order_id=order.id,
            total_amount=str(order.total_amount),
        )
        return order_to_dto(order)
