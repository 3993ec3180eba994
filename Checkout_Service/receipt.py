from decimal import Decimal
from functools import reduce
from typing import Dict, List, Sequence, Tuple

from pricing.basket import Basket
from pricing.factory import BasketFactory
from pricing.money import round_money


# ============ Форматирование ============


def format_money(amount, symbol: str = "$") -> str:
    """Сумма с символом валюты, всегда 2 знака"""
    return f"{symbol}{round_money(amount):,.2f}"


# ============ Строки чека ============


def line_items(basket: Basket) -> List[dict]:
    """Позиции корзины с ценами из каталога"""
    catalog = basket.catalog

    def to_line(item: Tuple[str, int]) -> dict:
        code, qty = item
        product = catalog.get_product(code)
        return {
            "code": code,
            "name": product.name,
            "unit_price": product.price,
            "quantity": qty,
            "line_total": product.price * qty,
        }

    return [to_line(item) for item in sorted(basket.get_items().items())]


def offer_lines(basket: Basket) -> List[dict]:
    """Только сработавшие офферы"""
    return [
        {"description": offer.describe(), "discount": discount}
        for offer, discount in basket.offer_discounts()
        if discount > 0
    ]


def basket_summary(basket: Basket) -> dict:
    """Сводка по корзине: позиции, скидки, доставка, итог"""
    breakdown = basket.breakdown()
    return {
        "items": line_items(basket),
        "offers": offer_lines(basket),
        "item_count": basket.item_count,
        "subtotal": breakdown.subtotal,
        "discount": breakdown.discount,
        "discounted_subtotal": breakdown.discounted_subtotal,
        "delivery": breakdown.delivery,
        "total": breakdown.total,
    }


def render_receipt(summary: dict, symbol: str = "$") -> str:
    """Текстовый чек из basket_summary()"""
    if not summary["items"]:
        return f"Basket is empty.\nTotal: {format_money(summary['total'], symbol)}"

    def money(amount) -> str:
        return format_money(amount, symbol)

    lines = ["Basket Contents:"]
    lines += [
        f"  {item['code']} {item['name']} × {item['quantity']}: {money(item['line_total'])}"
        for item in summary["items"]
    ]
    lines.append(f"Subtotal: {money(summary['subtotal'])}")
    lines += [
        f"  {offer['description']}: -{money(offer['discount'])}"
        for offer in summary["offers"]
    ]
    lines.append(f"Delivery: {money(summary['delivery'])}")
    lines.append(f"Total: {money(summary['total'])}")
    return "\n".join(lines)


# ============ Демо-сценарии ============


DEMO_SCENARIOS: Tuple[Tuple[Tuple[str, ...], Decimal], ...] = (
    (("B01", "G01"), Decimal("37.85")),
    (("R01", "R01"), Decimal("54.37")),
    (("R01", "G01"), Decimal("60.85")),
    (("B01", "B01", "R01", "R01", "R01"), Decimal("98.27")),
)


def run_scenarios(
    factory: BasketFactory,
    scenarios: Sequence[Tuple[Sequence[str], Decimal]] = DEMO_SCENARIOS,
) -> List[dict]:
    """Каждый сценарий в новой корзине фабрики"""

    def run(scenario: Tuple[Sequence[str], Decimal]) -> dict:
        codes, expected = scenario
        basket = factory.create_basket()
        for code in codes:
            basket.add(code)
        total = basket.total()
        return {
            "products": tuple(codes),
            "expected": expected,
            "total": total,
            "passed": total == expected,
        }

    return list(map(run, scenarios))


def scenarios_report(results: List[dict]) -> Dict[str, int]:
    """Сколько сценариев прошло"""
    passed = reduce(lambda acc, r: acc + (1 if r["passed"] else 0), results, 0)
    return {"total": len(results), "passed": passed, "failed": len(results) - passed}
