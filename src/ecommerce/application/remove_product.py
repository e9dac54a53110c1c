"""Application service: Remove Product use case."""

from __future__ import annotations

from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Delete a product. Orders that reference it keep their own copy
        of its name and price."""
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError("Product", product_id)
        self._product_repo.delete(product_id)
