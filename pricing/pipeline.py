from dataclasses import replace
from decimal import Decimal
from functools import reduce
from typing import Callable, Mapping, Sequence, Tuple

from .catalog import Catalog
from .delivery import DeliveryCalculator
from .domain import PriceBreakdown
from .money import ZERO, round_money
from .offers import Offer

Stage = Callable[[PriceBreakdown], PriceBreakdown]


def pipe(*funcs):
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs)


# ============ Чистые шаги расчёта ============


def subtotal_of(items: Mapping[str, int], catalog: Catalog) -> Decimal:
    """Сумма цена × количество по всем позициям, до скидок"""
    return reduce(
        lambda acc, item: acc + catalog.get_product(item[0]).price * item[1],
        items.items(),
        ZERO,
    )


def offer_discounts(
    items: Mapping[str, int], catalog: Catalog, offers: Sequence[Offer]
) -> Tuple[Tuple[Offer, Decimal], ...]:
    """Вклад каждого оффера; каждый уже округлён самим оффером"""
    return tuple((offer, offer.calculate_discount(items, catalog)) for offer in offers)


def discount_of(items: Mapping[str, int], catalog: Catalog, offers: Sequence[Offer]) -> Decimal:
    return reduce(
        lambda acc, pair: acc + pair[1], offer_discounts(items, catalog, offers), ZERO
    )


# ============ Сборка пайплайна ============


def pricing_pipeline(
    items: Mapping[str, int],
    catalog: Catalog,
    offers: Sequence[Offer],
    delivery_calculator: DeliveryCalculator,
) -> Stage:
    """
    subtotal → discount → delivery → total.
    Итог округляется ещё раз поверх округления каждого оффера.
    """

    def with_subtotal(b: PriceBreakdown) -> PriceBreakdown:
        return replace(b, subtotal=subtotal_of(items, catalog))

    def with_discount(b: PriceBreakdown) -> PriceBreakdown:
        discount = discount_of(items, catalog, offers)
        # скидка не может увести сумму ниже нуля
        return replace(b, discount=discount, discounted_subtotal=max(b.subtotal - discount, ZERO))

    def with_delivery(b: PriceBreakdown) -> PriceBreakdown:
        return replace(b, delivery=delivery_calculator.calculate_delivery(b.discounted_subtotal))

    def with_total(b: PriceBreakdown) -> PriceBreakdown:
        return replace(b, total=round_money(b.discounted_subtotal + b.delivery))

    return pipe(with_subtotal, with_discount, with_delivery, with_total)


def price_items(
    items: Mapping[str, int],
    catalog: Catalog,
    offers: Sequence[Offer],
    delivery_calculator: DeliveryCalculator,
) -> PriceBreakdown:
    return pricing_pipeline(items, catalog, offers, delivery_calculator)(PriceBreakdown())
