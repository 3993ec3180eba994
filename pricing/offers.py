from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping

from .catalog import Catalog
from .errors import ValidationError
from .money import ZERO, round_money, to_money


class Offer(ABC):
    """
    Правило скидки. Не хранит состояния корзины: скидка считается чистой функцией
    от (items, catalog). Каждое правило само округляет свой вклад до 2 знаков.
    """

    @abstractmethod
    def calculate_discount(self, items: Mapping[str, int], catalog: Catalog) -> Decimal:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...

    def __str__(self) -> str:
        return self.describe()


def _require_code(product_code: str) -> str:
    if not product_code:
        raise ValidationError("Product code cannot be empty")
    return product_code


class BuyOneGetOneHalfPriceOffer(Offer):
    """Каждый второй товар с этим кодом идёт за полцены"""

    def __init__(self, product_code: str):
        self.product_code = _require_code(product_code)

    def calculate_discount(self, items: Mapping[str, int], catalog: Catalog) -> Decimal:
        quantity = items.get(self.product_code, 0)
        if quantity < 2:
            return ZERO

        half_price = catalog.get_product(self.product_code).price / 2
        return round_money((quantity // 2) * half_price)

    def describe(self) -> str:
        return f"Buy one {self.product_code}, get the second half price"

    def __repr__(self) -> str:
        return f"BuyOneGetOneHalfPriceOffer({self.product_code!r})"


class ProductPercentageDiscountOffer(Offer):
    """Процент скидки на все единицы товара, если их не меньше minimum_quantity"""

    def __init__(self, product_code: str, percentage, minimum_quantity: int = 1):
        self.product_code = _require_code(product_code)

        percentage = to_money(percentage, "Discount percentage")
        if percentage < 0 or percentage > 100:
            raise ValidationError("Discount percentage must be between 0 and 100")
        if isinstance(minimum_quantity, bool) or not isinstance(minimum_quantity, int):
            raise ValidationError(
                f"Minimum quantity must be an integer, got {minimum_quantity!r}"
            )
        if minimum_quantity < 1:
            raise ValidationError("Minimum quantity must be at least 1")

        self.percentage = percentage
        self.minimum_quantity = minimum_quantity

    def calculate_discount(self, items: Mapping[str, int], catalog: Catalog) -> Decimal:
        quantity = items.get(self.product_code, 0)
        if quantity < self.minimum_quantity:
            return ZERO

        line_value = catalog.get_product(self.product_code).price * quantity
        return round_money(line_value * self.percentage / 100)

    def describe(self) -> str:
        plural = "s" if self.minimum_quantity > 1 else ""
        return (
            f"{self.percentage:.1f}% off {self.product_code} "
            f"(minimum {self.minimum_quantity} item{plural})"
        )

    def __repr__(self) -> str:
        return (
            f"ProductPercentageDiscountOffer({self.product_code!r}, "
            f"{self.percentage}, minimum_quantity={self.minimum_quantity})"
        )
