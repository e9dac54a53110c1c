"""Product aggregate.

Products live independently of orders. Their price is live: it can change
at any time, and orders only ever hold a copy of it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    description: str = ""
    image_url: str | None = None

    def update_details(
        self,
        name: str,
        description: str,
        price: Money,
        image_url: str | None,
    ) -> None:
        """Replace every editable field.

        Existing orders are unaffected because their line items carry
        their own price copy.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()
        self.description = description
        self.price = price
        self.image_url = image_url
