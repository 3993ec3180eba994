import logging
from typing import Dict, Iterable, Iterator

from .domain import Product
from .errors import ProductNotFoundError
from .ftypes import Maybe

logger = logging.getLogger(__name__)


class Catalog:
    """
    Каталог товаров: код → Product.
    Коды регистрозависимые, без нормализации. Повторное добавление кода
    заменяет прежний товар.
    """

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Dict[str, Product] = {}
        for product in products:
            self.add_product(product)

    def add_product(self, product: Product) -> None:
        if product.code in self._products:
            logger.debug("Replacing catalog product %s", product.code)
        self._products[product.code] = product

    def has_product(self, code: str) -> bool:
        return code in self._products

    def get_product(self, code: str) -> Product:
        if not self.has_product(code):
            raise ProductNotFoundError(code)
        return self._products[code]

    def find_product(self, code: str) -> Maybe[Product]:
        """Безопасный поиск: Nothing вместо исключения"""
        return Maybe.from_optional(self._products.get(code))

    def get_all_products(self) -> Dict[str, Product]:
        """Копия словаря: изменения снаружи не трогают каталог"""
        return dict(self._products)

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(tuple(self._products.values()))

    def __repr__(self) -> str:
        return f"Catalog({', '.join(self._products)})"
