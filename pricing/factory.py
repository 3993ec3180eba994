from typing import Iterable, Optional, Tuple

from .basket import Basket
from .catalog import Catalog
from .config import load_seed
from .delivery import DeliveryCalculator, TieredDeliveryCalculator
from .domain import Product
from .offers import BuyOneGetOneHalfPriceOffer, Offer


def default_catalog() -> Catalog:
    return Catalog(
        [
            Product("R01", "Red Widget", "32.95"),
            Product("G01", "Green Widget", "24.95"),
            Product("B01", "Blue Widget", "7.95"),
        ]
    )


def default_offers() -> Tuple[Offer, ...]:
    return (BuyOneGetOneHalfPriceOffer("R01"),)


class BasketFactory:
    """
    Фасад сборки корзин.
    Все корзины фабрики делят текущие каталог, доставку и офферы по ссылке.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        delivery_calculator: Optional[DeliveryCalculator] = None,
        offers: Optional[Iterable[Offer]] = None,
    ):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.delivery_calculator = (
            delivery_calculator
            if delivery_calculator is not None
            else TieredDeliveryCalculator.acme_rules()
        )
        self.offers = tuple(offers) if offers is not None else default_offers()

    @classmethod
    def from_config(cls, path: str) -> "BasketFactory":
        """Фабрика по seed-файлу (см. data/seed.json)"""
        catalog, delivery_calculator, offers = load_seed(path)
        return cls(catalog, delivery_calculator, offers)

    def set_catalog(self, catalog: Catalog) -> "BasketFactory":
        self.catalog = catalog
        return self

    def set_delivery_calculator(self, calculator: DeliveryCalculator) -> "BasketFactory":
        self.delivery_calculator = calculator
        return self

    def set_offers(self, offers: Iterable[Offer]) -> "BasketFactory":
        self.offers = tuple(offers)
        return self

    def create_basket(self) -> Basket:
        return Basket(self.catalog, self.delivery_calculator, self.offers)
