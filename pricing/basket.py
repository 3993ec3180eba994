import logging
from decimal import Decimal
from typing import Dict, Iterable, Tuple

from .catalog import Catalog
from .delivery import DeliveryCalculator
from .domain import PriceBreakdown
from .errors import InvalidProductError
from .ftypes import Either
from .offers import Offer
from .pipeline import discount_of, offer_discounts, price_items, subtotal_of

logger = logging.getLogger(__name__)


class Basket:
    """
    Корзина одной сессии оформления.
    Каталог, доставка и офферы общие (по ссылке), items у каждой свои.
    """

    def __init__(
        self,
        catalog: Catalog,
        delivery_calculator: DeliveryCalculator,
        offers: Iterable[Offer] = (),
    ):
        self._catalog = catalog
        self._delivery_calculator = delivery_calculator
        self._offers: Tuple[Offer, ...] = tuple(offers)
        self._items: Dict[str, int] = {}

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def delivery_calculator(self) -> DeliveryCalculator:
        return self._delivery_calculator

    @property
    def offers(self) -> Tuple[Offer, ...]:
        return self._offers

    # ============ Изменение состояния ============

    def add(self, product_code: str) -> None:
        if not self._catalog.has_product(product_code):
            logger.warning("Rejected unknown product code %r", product_code)
            raise InvalidProductError(product_code)

        self._items[product_code] = self._items.get(product_code, 0) + 1
        logger.debug("Added %s, quantity now %d", product_code, self._items[product_code])

    def try_add(self, product_code: str) -> Either[dict, Dict[str, int]]:
        """
        add() без исключения:
        Left({"error", "code", "kind"}) для неизвестного кода, Right(items) при успехе
        """
        return Either.attempt(lambda: self.add(product_code), (InvalidProductError,)).map(
            lambda _: self.get_items()
        )

    def clear(self) -> None:
        self._items = {}
        logger.debug("Basket cleared")

    # ============ Чтение ============

    def get_items(self) -> Dict[str, int]:
        return dict(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return sum(self._items.values())

    def subtotal(self) -> Decimal:
        return subtotal_of(self._items, self._catalog)

    def discount(self) -> Decimal:
        return discount_of(self._items, self._catalog, self._offers)

    def offer_discounts(self) -> Tuple[Tuple[Offer, Decimal], ...]:
        return offer_discounts(self._items, self._catalog, self._offers)

    def breakdown(self) -> PriceBreakdown:
        result = price_items(self._items, self._catalog, self._offers, self._delivery_calculator)
        logger.debug("Priced basket %s: %s", self._items, result)
        return result

    def total(self) -> Decimal:
        return self.breakdown().total

    def __repr__(self) -> str:
        return f"Basket({self._items})"
