import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from decimal import Decimal

import pytest
from pricing.basket import Basket
from pricing.catalog import Catalog
from pricing.delivery import TieredDeliveryCalculator
from pricing.domain import Product
from pricing.errors import InvalidProductError
from pricing.factory import BasketFactory, default_catalog, default_offers
from pricing.offers import BuyOneGetOneHalfPriceOffer, ProductPercentageDiscountOffer

SEED_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "seed.json")


def test_default_catalog_contents():
    products = default_catalog().get_all_products()
    assert {code: p.price for code, p in products.items()} == {
        "R01": Decimal("32.95"),
        "G01": Decimal("24.95"),
        "B01": Decimal("7.95"),
    }
    assert products["B01"].name == "Blue Widget"


def test_create_basket_with_defaults():
    basket = BasketFactory().create_basket()
    assert isinstance(basket, Basket)
    basket.add("R01")
    basket.add("G01")
    basket.add("B01")
    assert len(basket.get_items()) == 3


def test_default_offer_is_bogohp_on_red():
    (offer,) = default_offers()
    assert isinstance(offer, BuyOneGetOneHalfPriceOffer)
    assert offer.product_code == "R01"


def test_default_delivery_rules():
    basket = BasketFactory().create_basket()
    basket.add("B01")
    assert basket.total() == Decimal("12.90")

    basket.clear()
    basket.add("G01")
    basket.add("G01")
    assert basket.total() == Decimal("54.85")

    basket.add("G01")
    assert basket.total() == Decimal("77.80")


def test_set_custom_catalog():
    factory = BasketFactory()
    factory.set_catalog(Catalog([Product("CUSTOM", "Custom Product", 15.99)]))
    basket = factory.create_basket()
    basket.add("CUSTOM")
    assert basket.get_items()["CUSTOM"] == 1

    with pytest.raises(InvalidProductError):
        basket.add("R01")


def test_set_custom_delivery_calculator():
    factory = BasketFactory()
    factory.set_delivery_calculator(TieredDeliveryCalculator([{"threshold": 0.0, "cost": 9.99}]))
    basket = factory.create_basket()
    basket.add("B01")
    assert basket.total() == Decimal("17.94")


def test_set_custom_offers():
    factory = BasketFactory().set_offers([ProductPercentageDiscountOffer("R01", 25.0, 1)])
    basket = factory.create_basket()
    basket.add("R01")
    # 32.95 − 8.24 = 24.71, + 4.95
    assert basket.total() == Decimal("29.66")


def test_empty_offers():
    basket = BasketFactory().set_offers([]).create_basket()
    basket.add("R01")
    basket.add("R01")
    assert basket.total() == Decimal("68.85")


def test_fluent_configuration():
    basket = (
        BasketFactory()
        .set_catalog(Catalog([Product("TEST", "Test Product", 20.00)]))
        .set_delivery_calculator(TieredDeliveryCalculator([(0.0, 5.00)]))
        .set_offers([ProductPercentageDiscountOffer("TEST", 10.0, 1)])
        .create_basket()
    )
    basket.add("TEST")
    assert basket.total() == Decimal("23.00")


def test_setters_return_factory():
    factory = BasketFactory()
    assert factory.set_catalog(default_catalog()) is factory
    assert factory.set_delivery_calculator(TieredDeliveryCalculator.acme_rules()) is factory
    assert factory.set_offers(()) is factory


def test_constructor_with_all_collaborators():
    catalog = Catalog([Product("SPECIAL", "Special Product", 50.00)])
    delivery = TieredDeliveryCalculator([(0.0, 2.50)])
    offers = [ProductPercentageDiscountOffer("SPECIAL", 20.0, 1)]
    basket = BasketFactory(catalog, delivery, offers).create_basket()
    basket.add("SPECIAL")
    assert basket.total() == Decimal("42.50")


def test_constructor_with_none_uses_defaults():
    basket = BasketFactory(None, None, None).create_basket()
    basket.add("R01")
    basket.add("G01")
    basket.add("B01")
    assert basket.total() > 0


def test_baskets_are_independent():
    factory = BasketFactory()
    basket1 = factory.create_basket()
    basket2 = factory.create_basket()
    assert basket1 is not basket2

    basket1.add("R01")
    assert len(basket1.get_items()) == 1
    assert basket2.get_items() == {}


def test_collaborators_shared_by_reference():
    """Корзины не копируют каталог: новый товар виден во всех"""
    factory = BasketFactory()
    basket1 = factory.create_basket()
    basket2 = factory.create_basket()
    assert basket1.catalog is basket2.catalog is factory.catalog
    assert basket1.delivery_calculator is factory.delivery_calculator

    factory.catalog.add_product(Product("Y01", "Yellow Widget", 5))
    basket2.add("Y01")
    assert basket2.get_items() == {"Y01": 1}


def test_from_config_matches_defaults():
    factory = BasketFactory.from_config(SEED_PATH)
    basket = factory.create_basket()
    for code in ("B01", "B01", "R01", "R01", "R01"):
        basket.add(code)
    assert basket.total() == Decimal("98.27")
