"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from ecommerce.application.dto import ProductDTO
from ecommerce.application.presenter import product_to_dto
from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str,
        description: str = "",
        image_url: str | None = None,
    ) -> ProductDTO:
        """Replace a product's details, including its price.

        This does NOT affect any existing orders; they captured a
        price snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        product.update_details(
            name=name,
            description=description,
            price=Money.of(price),
            image_url=image_url,
        )
        self._product_repo.save(product)
        logger.info("product_updated", product_id=product_id, price=str(product.price))
        return product_to_dto(product)
