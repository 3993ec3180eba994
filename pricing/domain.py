from dataclasses import dataclass
from decimal import Decimal

from .errors import ValidationError
from .money import ZERO, to_money


@dataclass(frozen=True)
class Product:
    code: str
    name: str
    price: Decimal

    def __post_init__(self):
        # frozen dataclass: нормализуем цену через object.__setattr__
        price = to_money(self.price, "Product price")
        if price < 0:
            raise ValidationError("Product price cannot be negative")
        if not self.code:
            raise ValidationError("Product code cannot be empty")
        if not self.name:
            raise ValidationError("Product name cannot be empty")
        object.__setattr__(self, "price", price)


@dataclass(frozen=True)
class DeliveryTier:
    """Тариф доставки: cost для сумм от threshold и выше"""

    threshold: Decimal
    cost: Decimal

    def __post_init__(self):
        threshold = to_money(self.threshold, "Delivery threshold")
        cost = to_money(self.cost, "Delivery cost")
        if threshold < 0:
            raise ValidationError("Delivery threshold cannot be negative")
        if cost < 0:
            raise ValidationError("Delivery cost cannot be negative")
        object.__setattr__(self, "threshold", threshold)
        object.__setattr__(self, "cost", cost)


@dataclass(frozen=True)
class PriceBreakdown:
    """Результат одного прогона ценообразования"""

    subtotal: Decimal = ZERO
    discount: Decimal = ZERO
    discounted_subtotal: Decimal = ZERO
    delivery: Decimal = ZERO
    total: Decimal = ZERO
