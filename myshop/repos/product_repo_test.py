from decimal import Decimal

import pytest

from myshop.domain.schemas import Product
from myshop.repos.product_repo import ProductRepo


def make(product_id: int, name: str = "x") -> Product:
    return Product(id=product_id, name=name, price=Decimal("1.00"))


@pytest.fixture
def repo() -> ProductRepo:
    return ProductRepo([make(1, "a"), make(2, "b"), make(3, "c")])


def test_list_products_returns_copy(repo):
    listed = repo.list_products()
    listed.clear()
    assert repo.count() == 3


def test_find_first_and_index_of(repo):
    assert repo.find_first(2).name == "b"
    assert repo.find_first(99) is None
    assert repo.index_of(3) == 2
    assert repo.index_of(99) == -1


def test_find_first_returns_first_duplicate(repo):
    repo.add(make(2, "b-dup"))
    assert repo.find_first(2).name == "b"


def test_replace_keeps_position(repo):
    repo.replace(1, make(20, "bb"))
    assert [p.id for p in repo.list_products()] == [1, 20, 3]


def test_remove_all_removes_every_match(repo):
    repo.add(make(2, "b-dup"))
    assert repo.remove_all(2) == 2
    assert [p.id for p in repo.list_products()] == [1, 3]
    assert repo.remove_all(2) == 0


def test_filter_keeps_order(repo):
    assert [p.id for p in repo.filter(lambda p: p.id != 2)] == [1, 3]


def test_add_all_if_empty():
    empty = ProductRepo()
    assert empty.add_all_if_empty([make(1), make(2)]) is True
    assert [p.id for p in empty.list_products()] == [1, 2]
    assert empty.add_all_if_empty([make(3)]) is False
    assert [p.id for p in empty.list_products()] == [1, 2]
