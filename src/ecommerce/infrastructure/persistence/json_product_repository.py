"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from ecommerce.domain.repository.product_repository import ProductRepository
from ecommerce.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def search_by_name(self, keyword: str) -> list[Product]:
        needle = keyword.lower()
        return [p for p in self._load().values() if needle in p.name.lower()]

    def filter_by_price(self, min_price: Decimal, max_price: Decimal) -> list[Product]:
        return [
            p for p in self._load().values()
            if min_price <= p.price.amount <= max_price
        ]

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> None:
        with self._file.locked():
            products = self._load()
            if products.pop(product_id, None) is not None:
                self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {p.id: p for p in self._file.load_as(self._to_domain)}

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist([
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "image_url": p.image_url,
            }
            for p in products.values()
        ])

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            description=raw.get("description", ""),
            image_url=raw.get("image_url"),
        )
