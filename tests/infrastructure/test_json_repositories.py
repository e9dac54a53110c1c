"""Tests for the JSON-file repositories, using pytest's tmp_path."""

import json
import os
import threading
from decimal import Decimal

import pytest

from ecommerce.domain.exceptions import StorageError
from ecommerce.domain.model.account import Account
from ecommerce.domain.model.order import Order, OrderLineItem, OrderStatus
from ecommerce.domain.model.product import Product
from ecommerce.domain.model.value_objects import Money, Quantity
from ecommerce.infrastructure.persistence.json_account_repository import JsonAccountRepository
from ecommerce.infrastructure.persistence.json_order_repository import JsonOrderRepository
from ecommerce.infrastructure.persistence.json_product_repository import JsonProductRepository


def _order(account_id: str = "U1") -> Order:
    return Order.create(account_id, [
        OrderLineItem("P2", "Mouse", Quantity(3), Money.of("19.99")),
        OrderLineItem("P1", "Laptop", Quantity(1), Money.of("1000.00")),
    ])


class TestJsonOrderRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "orders.json"
        JsonOrderRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_assigns_id_and_reloads_graph(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        repo.save(order)

        assert order.id == 1
        loaded = repo.get_by_id(1)
        assert loaded.account_id == "U1"
        assert loaded.status == OrderStatus.PENDING
        assert loaded.total_amount == Money.of("1059.97")
        assert loaded.created_at == order.created_at
        assert loaded.items == order.items

    def test_amounts_are_stored_as_strings(self, tmp_path):
        path = tmp_path / "orders.json"
        JsonOrderRepository(path).save(_order())
        raw = json.loads(path.read_text())[0]
        assert raw["total_amount"] == "1059.97"
        assert raw["items"][0]["unit_price"] == "19.99"

    def test_listing_by_account_in_id_order(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        for account_id in ["U1", "U2", "U1"]:
            repo.save(_order(account_id))

        assert [o.id for o in repo.list_all()] == [1, 2, 3]
        assert [o.id for o in repo.list_by_account("U1")] == [1, 3]
        assert repo.list_by_account("U9") == []

    def test_failed_write_leaves_store_untouched(self, tmp_path, monkeypatch):
        path = tmp_path / "orders.json"
        repo = JsonOrderRepository(path)
        repo.save(_order())
        before = path.read_text()

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", broken_replace)
        order = _order()
        with pytest.raises(StorageError, match="disk full"):
            repo.save(order)

        assert order.id is None
        assert path.read_text() == before
        assert list(tmp_path.glob("*.tmp")) == []

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text("{not json")
        repo = JsonOrderRepository(path)
        with pytest.raises(StorageError, match="Cannot read"):
            repo.list_all()

    @pytest.mark.parametrize("content", ['{"id": 1}', '[1, 2]', '"orders"'])
    def test_non_list_file_raises_storage_error(self, tmp_path, content):
        path = tmp_path / "orders.json"
        path.write_text(content)
        repo = JsonOrderRepository(path)
        with pytest.raises(StorageError, match="does not hold a list of records"):
            repo.list_all()

    def test_record_missing_keys_raises_storage_error(self, tmp_path):
        path = tmp_path / "orders.json"
        path.write_text('[{"id": 1}]')
        repo = JsonOrderRepository(path)
        with pytest.raises(StorageError, match="Malformed record"):
            repo.list_all()
        with pytest.raises(StorageError, match="Malformed record"):
            repo.get_by_id(1)

    def test_concurrent_saves_from_separate_instances_keep_every_order(self, tmp_path):
        path = tmp_path / "orders.json"
        writers = 24
        barrier = threading.Barrier(writers)
        orders = [_order(f"U{n}") for n in range(writers)]
        errors = []

        def place(order):
            repo = JsonOrderRepository(path)
            barrier.wait()
            try:
                repo.save(order)
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=place, args=(o,)) for o in orders]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert sorted(o.id for o in orders) == list(range(1, writers + 1))
        stored = JsonOrderRepository(path).list_all()
        assert [o.id for o in stored] == list(range(1, writers + 1))
        assert {o.id: o.account_id for o in stored} == {o.id: o.account_id for o in orders}
        assert list(tmp_path.glob("*.tmp")) == []


class TestJsonProductRepository:

    def test_round_trip_and_queries(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Laptop", price=Money.of("1000.00"), description="15 inch"))
        repo.save(Product(id="2", name="Mouse", price=Money.of("19.99"), image_url="m.png"))

        laptop = repo.get_by_id("1")
        assert laptop.description == "15 inch"
        assert laptop.price.amount == Decimal("1000.00")
        assert repo.get_by_id("2").image_url == "m.png"
        assert [p.id for p in repo.search_by_name("LAP")] == ["1"]
        assert [p.id for p in repo.filter_by_price(Decimal("0"), Decimal("20"))] == ["2"]

        repo.delete("1")
        assert repo.get_by_id("1") is None
        assert [p.id for p in repo.list_all()] == ["2"]

    def test_unparseable_price_raises_storage_error(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('[{"id": "1", "name": "Laptop", "price": "abc"}]')
        repo = JsonProductRepository(path)
        with pytest.raises(StorageError, match="Malformed record"):
            repo.get_by_id("1")

    def test_concurrent_saves_keep_every_product(self, tmp_path):
        path = tmp_path / "products.json"
        writers = 16
        barrier = threading.Barrier(writers)
        errors = []

        def add(n):
            repo = JsonProductRepository(path)
            barrier.wait()
            try:
                repo.save(Product(id=str(n), name=f"Item {n}", price=Money.of("1.00")))
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=add, args=(n,)) for n in range(writers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        stored = JsonProductRepository(path).list_all()
        assert sorted(p.id for p in stored) == sorted(str(n) for n in range(writers))


class TestJsonAccountRepository:

    def test_round_trip_and_delete(self, tmp_path):
        repo = JsonAccountRepository(tmp_path / "accounts.json")
        account = Account.register("1", "Buyer", "buyer@example.com", "pw")
        repo.save(account)

        loaded = repo.get_by_email("BUYER@example.com")
        assert loaded.id == "1"
        assert loaded.password_hash == account.password_hash
        assert loaded.created_at == account.created_at

        account.update_profile("Renamed", "buyer@example.com")
        repo.save(account)
        assert [a.name for a in repo.list_all()] == ["Renamed"]

        repo.delete("1")
        assert repo.get_by_id("1") is None

    def test_record_missing_keys_raises_storage_error(self, tmp_path):
        path = tmp_path / "accounts.json"
        path.write_text('[{"id": "1", "name": "Buyer"}]')
        repo = JsonAccountRepository(path)
        with pytest.raises(StorageError, match="Malformed record"):
            repo.get_by_email("buyer@example.com")
