"""Stateless mapping from domain aggregates to their outbound DTOs."""

from __future__ import annotations

from ecommerce.application.dto import AccountDTO, OrderDTO, OrderLineItemDTO, ProductDTO
from ecommerce.domain.model.account import Account
from ecommerce.domain.model.order import Order
from ecommerce.domain.model.product import Product


def order_to_dto(order: Order) -> OrderDTO:
    """Map a persisted order, keeping line items in stored order.

    Each line item reports the price it was ordered at, not the product's
    current price.
    """
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        account_id=order.account_id,
        created_at=order.created_at,
        total_amount=order.total_amount.amount,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=item.unit_price.amount,
            )
            for item in order.items
        ],
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price.amount,
        image_url=product.image_url,
    )


def account_to_dto(account: Account) -> AccountDTO:
    return AccountDTO(
        id=account.id,
        name=account.name,
        email=account.email,
        created_at=account.created_at,
    )
