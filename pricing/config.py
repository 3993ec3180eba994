import json
import logging
from typing import Callable, Dict, Tuple

from .catalog import Catalog
from .delivery import TieredDeliveryCalculator
from .domain import Product
from .errors import ValidationError
from .offers import BuyOneGetOneHalfPriceOffer, Offer, ProductPercentageDiscountOffer

logger = logging.getLogger(__name__)


def _bogohp(raw: dict) -> Offer:
    return BuyOneGetOneHalfPriceOffer(raw["product_code"])


def _percentage(raw: dict) -> Offer:
    return ProductPercentageDiscountOffer(
        raw["product_code"],
        raw["percentage"],
        raw.get("minimum_quantity", 1),
    )


# type в seed-файле → конструктор оффера
OFFER_TYPES: Dict[str, Callable[[dict], Offer]] = {
    "bogohp": _bogohp,
    "percentage": _percentage,
}


def offer_from_dict(raw: dict) -> Offer:
    kind = raw.get("type")
    if kind not in OFFER_TYPES:
        raise ValidationError(f"Unknown offer type: {kind!r}")
    try:
        return OFFER_TYPES[kind](raw)
    except KeyError as missing:
        raise ValidationError(f"Offer '{kind}' is missing field {missing}") from None


def product_from_dict(raw: dict) -> Product:
    try:
        return Product(code=raw["code"], name=raw["name"], price=raw["price"])
    except KeyError as missing:
        raise ValidationError(f"Product is missing field {missing}") from None


def parse_seed(
    data: dict,
) -> Tuple[Catalog, TieredDeliveryCalculator, Tuple[Offer, ...]]:
    """Разбирает уже загруженный seed-словарь"""
    catalog = Catalog(map(product_from_dict, data.get("products", [])))
    delivery = TieredDeliveryCalculator(data.get("delivery_tiers", []))
    offers = tuple(map(offer_from_dict, data.get("offers", [])))
    return catalog, delivery, offers


def load_seed(
    path: str,
) -> Tuple[Catalog, TieredDeliveryCalculator, Tuple[Offer, ...]]:
    """Загружает seed.json: каталог, тарифы доставки и офферы"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    catalog, delivery, offers = parse_seed(data)
    logger.info(
        "Loaded %d products, %d delivery tiers, %d offers from %s",
        len(catalog),
        len(delivery.tiers),
        len(offers),
        path,
    )
    return catalog, delivery, offers
