# myshop/services/product_service.py
import enum
from decimal import Decimal
from typing import List, Tuple

from myshop.domain.schemas import ErrorOut, Product, ResultOut
from myshop.repos.product_repo import ProductRepo
from myshop.utils.logging import get_logger

logger = get_logger(__name__)

SORT_FIELDS = ("id", "name", "price")
SORT_DIRECTIONS = ("asc", "desc")


class ProductNotFoundError(ValueError):
    pass


class InvalidSortArgumentError(ValueError):
    pass


class UpsertOutcome(enum.Enum):
    CREATED = "created"
    REPLACED = "replaced"


class ProductService:
    """
    Operacje na katalogu produktow.
    query (list, get, filtry, sort) tylko czytaja repo,
    commands (create, upsert, delete) zmieniaja je w miejscu.
    """

    def __init__(self, repo: ProductRepo):
        self.repo = repo

    # query
    def list_products(self) -> List[Product]:
        return self.repo.list_products()

    def get_product(self, product_id: int) -> Product:
        product = self.repo.find_first(product_id)
        if product is None:
            logger.warning(f"Produkt {product_id} nie istnieje")
            raise ProductNotFoundError(f"Product with id= {product_id} not found")
        return product

    def get_result(self, product_id: int) -> ResultOut:
        """Jak get_product, ale brak produktu wraca jako dane, a nie wyjatek."""
        product = self.repo.find_first(product_id)
        if product is None:
            return ResultOut(error=ErrorOut(description=f"No product with id {product_id}"))
        return ResultOut(result=[product])

    def get_by_status(self, active: bool = True) -> List[Product]:
        return self.repo.filter(lambda p: p.is_active == active)

    def get_by_price(
        self,
        price_from: Decimal = Decimal("0.5"),
        price_to: Decimal = Decimal("1.9"),
    ) -> List[Product]:
        return self.repo.filter(lambda p: price_from <= p.price <= price_to)

    def sort_by(self, by: str = "id", how: str = "asc") -> List[Product]:
        if by not in SORT_FIELDS:
            logger.warning(f"Odrzucono sortowanie po nieznanym polu {by!r}")
            raise InvalidSortArgumentError(f"No {by} field in Product")
        if how not in SORT_DIRECTIONS:
            logger.warning(f"Odrzucono nieznany kierunek sortowania {how!r}")
            raise InvalidSortArgumentError(f"No {how} in sort")

        # sorted() zwraca nowa liste, katalog zostaje w swojej kolejnosci
        return sorted(
            self.repo.list_products(),
            key=lambda p: getattr(p, by),
            reverse=how == "desc",
        )

    # commands
    def create_product(self, product: Product) -> Product:
        created = self.repo.add(product)
        logger.info(f"Dodano produkt {created.id} ({created.name})")
        return created

    def upsert_product(self, product_id: int, product: Product) -> Tuple[Product, UpsertOutcome]:
        # id z payloadu zapisujemy tak jak przyszlo, nawet jesli != product_id
        with self.repo.lock:
            position = self.repo.index_of(product_id)
            if position == -1:
                self.repo.add(product)
                logger.info(f"Brak produktu {product_id}, dodano nowy wpis {product.id}")
                return product, UpsertOutcome.CREATED

            self.repo.replace(position, product)
            logger.info(f"Zastapiono produkt {product_id} na pozycji {position}")
            return product, UpsertOutcome.REPLACED

    def delete_product(self, product_id: int) -> None:
        removed = self.repo.remove_all(product_id)
        if not removed:
            logger.warning(f"Nie mozna usunac, produkt {product_id} nie istnieje")
            raise ProductNotFoundError(f"Product with id= {product_id} not found")
        logger.info(f"Usunieto produkt {product_id} (wpisow: {removed})")
