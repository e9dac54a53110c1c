"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ecommerce.application.add_product import AddProductHandler
from ecommerce.application.dto import ProductDTO
from ecommerce.application.remove_product import RemoveProductHandler
from ecommerce.application.show_products import (
    ListProductsHandler,
    SearchProductsHandler,
    ShowProductHandler,
)
from ecommerce.application.update_product import UpdateProductHandler
from ecommerce.domain.exceptions import DomainException
from ecommerce.infrastructure.bootstrap import product_repository
from ecommerce.infrastructure.config import Settings


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10.2f}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Free-text description.")
@click.option("--image-url", default=None, help="Link to a product image.")
@click.pass_obj
def product_add(
    settings: Settings, name: str, price: str, description: str, image_url: str | None
) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository(settings))
        product = handler.handle(
            name=name, price=price, description=description, image_url=image_url
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price:.2f}")


@click.command("list")
@click.option("--page", default=0, type=int, help="Zero-based page index.")
@click.option("--size", default=20, type=int, help="Products per page.")
@click.pass_obj
def product_list(settings: Settings, page: int, size: int) -> None:
    """List the products in the catalog, one page at a time."""
    try:
        result = ListProductsHandler(product_repository(settings)).handle(page, size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(result.items)
    if result.total:
        click.echo(f"Page {result.page + 1} of {result.total_pages} ({result.total} products)")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show one product."""
    try:
        product = ShowProductHandler(product_repository(settings)).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}: {product.name}")
    click.echo(f"Price:       {product.price:.2f}")
    click.echo(f"Description: {product.description or '-'}")
    click.echo(f"Image:       {product.image_url or '-'}")


@click.command("search")
@click.option("--name", "keyword", default=None, help="Case-insensitive name fragment.")
@click.option("--min-price", default=None, help="Lowest price, inclusive.")
@click.option("--max-price", default=None, help="Highest price, inclusive.")
@click.pass_obj
def product_search(
    settings: Settings,
    keyword: str | None,
    min_price: str | None,
    max_price: str | None,
) -> None:
    """Search products by name or by price range."""
    if keyword is None and (min_price is None or max_price is None):
        raise click.UsageError("Give --name, or both --min-price and --max-price.")

    try:
        handler = SearchProductsHandler(product_repository(settings))
        if keyword is not None:
            products = handler.by_name(keyword)
        else:
            products = handler.by_price_range(min_price, max_price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--description", default="", help="Free-text description.")
@click.option("--image-url", default=None, help="Link to a product image.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str,
    price: str,
    description: str,
    image_url: str | None,
) -> None:
    """Update a product. Existing orders keep the price they were placed at."""
    try:
        handler = UpdateProductHandler(product_repo=product_repository(settings))
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            description=description,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated; price is now {product.price:.2f}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_remove(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        RemoveProductHandler(product_repository(settings)).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed.")
