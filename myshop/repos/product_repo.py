# myshop/repos/product_repo.py
import threading
from typing import Callable, Iterable, List

from myshop.domain.schemas import Product


class ProductRepo:
    """
    Katalog produktow trzymany w pamieci procesu.
    Kolejnosc wstawiania jest zachowana, unikalnosc id nie jest wymuszana.
    """

    def __init__(self, products: Iterable[Product] | None = None):
        self._products: List[Product] = list(products or [])
        # RLock, bo serwis trzyma lock przez cale upsert i wola repo w srodku
        self.lock = threading.RLock()

    def list_products(self) -> List[Product]:
        with self.lock:
            return list(self._products)

    def count(self) -> int:
        with self.lock:
            return len(self._products)

    def find_first(self, product_id: int) -> Product | None:
        with self.lock:
            return next((p for p in self._products if p.id == product_id), None)

    def index_of(self, product_id: int) -> int:
        with self.lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    return i
            return -1

    def filter(self, predicate: Callable[[Product], bool]) -> List[Product]:
        with self.lock:
            return [p for p in self._products if predicate(p)]

    def add(self, product: Product) -> Product:
        with self.lock:
            self._products.append(product)
            return product

    def add_all_if_empty(self, products: Iterable[Product]) -> bool:
        with self.lock:
            if self._products:
                return False
            self._products.extend(products)
            return True

    def replace(self, position: int, product: Product) -> Product:
        with self.lock:
            self._products[position] = product
            return product

    def remove_all(self, product_id: int) -> int:
        """Usuwa wszystkie wpisy z danym id, zwraca liczbe usunietych."""
        with self.lock:
            kept = [p for p in self._products if p.id != product_id]
            removed = len(self._products) - len(kept)
            self._products = kept
            return removed
