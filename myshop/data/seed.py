# myshop/data/seed.py
from decimal import Decimal

from myshop.domain.schemas import Product
from myshop.repos.product_repo import ProductRepo


def initial_products() -> list[Product]:
    return [
        Product(id=1, name="Coca-Cola 0.33 aluminium", price=Decimal("0.86"), is_active=False),
        Product(id=2, name="RedBull 0.5 aluminium", price=Decimal("2.05"), is_active=True),
        Product(id=3, name="Goat cheese", price=Decimal("3.16"), is_active=True),
        Product(id=4, name="Ravioli Neapolitano with tomatoes", price=Decimal("1.12"), is_active=True),
    ]


def seed(repo: ProductRepo) -> None:
    # not forcing: only seed if empty
    repo.add_all_if_empty(initial_products())
