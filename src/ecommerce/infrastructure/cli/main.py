from pathlib import Path

import click

from ecommerce.infrastructure.cli.account_commands import (
    account_list,
    account_register,
    account_remove,
    account_show,
    account_update,
)
from ecommerce.infrastructure.cli.order_commands import order_create, order_list, order_show
from ecommerce.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_search,
    product_show,
    product_update,
)
from ecommerce.infrastructure.config import Settings
from ecommerce.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """ecommerce: catalog, accounts and orders"""
    settings = Settings.from_env(data_dir=data_dir)
    configure_logging(settings)
    ctx.obj = settings


@cli.group()
def order() -> None:
    """Create and list orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def account() -> None:
    """Manage buyer accounts."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
account.add_command(account_list)
account.add_command(account_register)
account.add_command(account_remove)
account.add_command(account_show)
account.add_command(account_update)
