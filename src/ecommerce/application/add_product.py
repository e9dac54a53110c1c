"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from ecommerce.application.dto import ProductDTO
from ecommerce.application.identifiers import next_sequential_id
from ecommerce.application.presenter import product_to_dto
from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        description: str = "",
        image_url: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=next_sequential_id(p.id for p in self._product_repo.list_all()),
            name=name.strip(),
            price=Money.of(price),
            description=description,
            image_url=image_url,
        )
        self._product_repo.save(product)
        logger.info("product_added", product_id=product.id, price=str(product.price))
        return product_to_dto(product)
