"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ecommerce.application.create_order import CreateOrderHandler
from ecommerce.application.dto import OrderDTO, OrderItemSpec
from ecommerce.application.list_orders import ListAccountOrdersHandler, ListOrdersHandler
from ecommerce.application.show_order import ShowOrderHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import (
    account_repository,
    order_repository,
    product_repository,
)
from ecommerce.infrastructure.config import Settings


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'P1:3,P2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            ) from None
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Account: {dto.account_id}")
    click.echo(f"Created: {dto.created_at:%Y-%m-%d %H:%M} UTC")
    click.echo()
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*44}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} "
            f"{item.quantity:>5} {item.price:>10.2f}"
        )
    click.echo(f"  {'-'*44}")
    click.echo(f"  {'Order Total':<27} {dto.total_amount:>17.2f}")


@click.command("create")
@click.option("--account", "account_id", required=True, help="Buyer account ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(settings: Settings, account_id: str, items: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    try:
        handler = CreateOrderHandler(
            order_repo=order_repository(settings),
            product_repo=product_repository(settings),
            account_repo=account_repository(settings),
        )
        dto = handler.handle(account_id=account_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(dto)


@click.command("list")
@click.option("--account", "account_id", default=None, help="Only orders of this account.")
@click.pass_obj
def order_list(settings: Settings, account_id: str | None) -> None:
    """List orders, optionally for a single account."""
    try:
        repo = order_repository(settings)
        if account_id is None:
            dtos = ListOrdersHandler(repo).handle()
        else:
            dtos = ListAccountOrdersHandler(repo).handle(account_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Account':<10} {'Items':>5} {'Total':>12} {'Status':<10}")
    click.echo("-" * 47)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.account_id:<10} {len(dto.items):>5} "
            f"{dto.total_amount:>12.2f} {dto.status:<10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        handler = ShowOrderHandler(order_repo=order_repository(settings))
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
