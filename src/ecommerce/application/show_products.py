"""Application services: catalog queries (single product, pages, search)."""

from __future__ import annotations

from ecommerce.application.dto import ProductDTO, ProductPage
from ecommerce.application.presenter import product_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError, ValidationError
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product_to_dto(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, page: int = 0, size: int = 20) -> ProductPage:
        """Return one zero-based page of the catalog."""
        if page < 0:
            raise ValidationError("Page index must not be negative")
        if size <= 0:
            raise ValidationError("Page size must be positive")

        products = self._product_repo.list_all()
        start = page * size
        return ProductPage(
            items=[product_to_dto(p) for p in products[start:start + size]],
            page=page,
            size=size,
            total=len(products),
        )


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_name(self, keyword: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.search_by_name(keyword)]

    def by_price_range(self, min_price: str, max_price: str) -> list[ProductDTO]:
        low, high = Money.of(min_price), Money.of(max_price)
        if low.amount > high.amount:
            raise ValidationError(
                f"Minimum price {low} is greater than maximum price {high}"
            )
        return [
            product_to_dto(p)
            for p in self._product_repo.filter_by_price(low.amount, high.amount)
        ]
