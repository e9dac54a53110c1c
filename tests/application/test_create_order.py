"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest

from ecommerce.application.create_order import CreateOrderHandler
from ecommerce.application.dto import OrderItemSpec
from ecommerce.domain.exceptions import EntityNotFoundError, StorageError, ValidationError
from ecommerce.domain.model.account import Account
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money
from tests.fakes import (
    FakeAccountRepository,
    FakeOrderRepository,
    FakeProductRepository,
    storage_down,
)


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            Product(id="P100", name="Laptop", price=Money.of("1000.00")),
            Product(id="P200", name="Mouse", price=Money.of("19.99")),
            Product(id="P300", name="Cable", price=Money.of("0.10")),
        ]
    accounts = [Account.register("U1", "Buyer", "buyer@example.com", "pass")]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    handler = CreateOrderHandler(order_repo, product_repo, FakeAccountRepository(accounts))
    return handler, order_repo, product_repo


class TestCreateOrderHappyPath:

    def test_single_item_total(self):
        handler, _, _ = _setup()
        dto = handler.handle("U1", [OrderItemSpec("P100", 2)])

        assert dto.total_amount == Decimal("2000.00")
        assert dto.status == "PENDING"
        assert dto.account_id == "U1"
        assert len(dto.items) == 1
        item = dto.items[0]
        assert (item.product_id, item.product_name) == ("P100", "Laptop")
        assert item.quantity == 2
        assert item.price == Decimal("1000.00")

    def test_total_is_exact_decimal_sum(self):
        handler, _, _ = _setup()
        dto = handler.handle("U1", [
            OrderItemSpec("P200", 3),
            OrderItemSpec("P300", 7),
            OrderItemSpec("P100", 1),
        ])
        assert dto.total_amount == Decimal("1060.67")

    def test_items_preserve_request_order(self):
        handler, _, _ = _setup()
        dto = handler.handle("U1", [
            OrderItemSpec("P300", 1),
            OrderItemSpec("P100", 1),
            OrderItemSpec("P200", 1),
        ])
        assert [i.product_id for i in dto.items] == ["P300", "P100", "P200"]

    def test_same_product_twice_gives_two_lines(self):
        handler, _, _ = _setup()
        dto = handler.handle("U1", [OrderItemSpec("P200", 1), OrderItemSpec("P200", 2)])
        assert [i.quantity for i in dto.items] == [1, 2]
        assert dto.total_amount == Decimal("59.97")

    def test_assigns_order_id_and_persists_once(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle("U1", [OrderItemSpec("P100", 1)])

        assert dto.id == 1
        assert order_repo.save_calls == 1
        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.account_id == "U1"

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        dto1 = handler.handle("U1", [OrderItemSpec("P100", 1)])
        dto2 = handler.handle("U1", [OrderItemSpec("P200", 1)])
        assert dto2.id == dto1.id + 1

    def test_free_product_allowed(self):
        handler, _, _ = _setup([Product(id="F1", name="Sticker", price=Money.of("0"))])
        dto = handler.handle("U1", [OrderItemSpec("F1", 4)])
        assert dto.total_amount == Decimal("0")


class TestCreateOrderPriceSnapshot:

    def test_price_change_does_not_touch_existing_order(self):
        handler, order_repo, product_repo = _setup()
        dto = handler.handle("U1", [OrderItemSpec("P100", 2)])

        laptop = product_repo.get_by_id("P100")
        laptop.update_details(laptop.name, laptop.description, Money.of("1499.00"), None)
        product_repo.save(laptop)

        saved = order_repo.get_by_id(dto.id)
        assert saved.total_amount == Money.of("2000.00")
        assert saved.items[0].unit_price == Money.of("1000.00")

    def test_new_order_uses_new_price(self):
        handler, _, product_repo = _setup()
        handler.handle("U1", [OrderItemSpec("P100", 1)])

        laptop = product_repo.get_by_id("P100")
        laptop.update_details(laptop.name, "", Money.of("900.00"), None)

        dto = handler.handle("U1", [OrderItemSpec("P100", 1)])
        assert dto.total_amount == Decimal("900.00")


class TestCreateOrderNotFound:

    def test_unknown_account_rejected_before_anything_else(self):
        handler, order_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Account not found with id: U9") as exc_info:
            handler.handle("U9", [OrderItemSpec("P100", 1)])

        assert exc_info.value.entity == "Account"
        assert exc_info.value.entity_id == "U9"
        assert order_repo.save_calls == 0
        assert product_repo.lookups == []

    def test_unknown_product_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found with id: P999") as exc_info:
            handler.handle("U1", [OrderItemSpec("P999", 1)])

        assert exc_info.value.entity == "Product"
        assert order_repo.save_calls == 0

    def test_unknown_product_after_valid_ones_is_all_or_nothing(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="P999"):
            handler.handle("U1", [
                OrderItemSpec("P100", 1),
                OrderItemSpec("P200", 2),
                OrderItemSpec("P999", 1),
            ])

        assert order_repo.save_calls == 0
        assert order_repo.list_all() == []


class TestCreateOrderValidation:

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        handler, order_repo, product_repo = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("U1", [OrderItemSpec("P100", 1), OrderItemSpec("P200", qty)])

        assert order_repo.save_calls == 0
        assert product_repo.lookups == []

    def test_empty_item_list_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("U1", [])
        assert order_repo.save_calls == 0


class TestCreateOrderStorageFailure:

    def test_storage_error_surfaces_unchanged(self):
        handler, order_repo, _ = _setup()
        failure = storage_down()
        order_repo.fail_with = failure

        with pytest.raises(StorageError) as exc_info:
            handler.handle("U1", [OrderItemSpec("P100", 1)])

        assert exc_info.value is failure
        assert order_repo.save_calls == 1
        assert order_repo.list_all() == []
