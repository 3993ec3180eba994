import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from typing import Iterable, Tuple

from .domain import DeliveryTier
from .errors import ConfigurationError, ValidationError
from .money import to_money

logger = logging.getLogger(__name__)


class DeliveryCalculator(ABC):
    """Стоимость доставки по сумме после скидок"""

    @abstractmethod
    def calculate_delivery(self, subtotal) -> Decimal:
        ...


def _to_tier(raw) -> DeliveryTier:
    """DeliveryTier, {"threshold": .., "cost": ..} или пара (threshold, cost)"""
    if isinstance(raw, DeliveryTier):
        return raw
    if isinstance(raw, Mapping):
        if raw.get("threshold") is None or raw.get("cost") is None:
            raise ValidationError("Each tier must have threshold and cost keys")
        return DeliveryTier(threshold=raw["threshold"], cost=raw["cost"])
    if isinstance(raw, (tuple, list)):
        if len(raw) != 2 or any(part is None for part in raw):
            raise ValidationError("Each tier must have threshold and cost keys")
        return DeliveryTier(threshold=raw[0], cost=raw[1])
    raise ValidationError(f"Unsupported delivery tier: {raw!r}")


class TieredDeliveryCalculator(DeliveryCalculator):
    """
    Тарифы отсортированы по порогу строго по убыванию.
    Берётся первый тариф, чей порог <= суммы.
    """

    def __init__(self, tiers: Iterable):
        self.tiers: Tuple[DeliveryTier, ...] = self._validate_tiers(tiers)

    @staticmethod
    def _validate_tiers(tiers: Iterable) -> Tuple[DeliveryTier, ...]:
        parsed = tuple(_to_tier(raw) for raw in tiers)
        if not parsed:
            raise ValidationError("Delivery tiers cannot be empty")

        for higher, lower in zip(parsed, parsed[1:]):
            if lower.threshold >= higher.threshold:
                raise ValidationError(
                    "Tiers must be sorted by threshold in descending order"
                )
        return parsed

    def calculate_delivery(self, subtotal) -> Decimal:
        amount = to_money(subtotal, "subtotal")
        for tier in self.tiers:
            if amount >= tier.threshold:
                return tier.cost

        logger.warning("No delivery tier matched subtotal %s (tiers: %s)", amount, self.tiers)
        raise ConfigurationError(f"No delivery tier found for subtotal: {amount}")

    @classmethod
    def acme_rules(cls) -> "TieredDeliveryCalculator":
        """Правила Acme Widget Co"""
        return cls(
            [
                DeliveryTier(threshold="90.00", cost="0.00"),  # бесплатно от 90
                DeliveryTier(threshold="50.00", cost="2.95"),
                DeliveryTier(threshold="0.00", cost="4.95"),
            ]
        )

    def __repr__(self) -> str:
        pairs = ", ".join(f"{t.threshold}→{t.cost}" for t in self.tiers)
        return f"TieredDeliveryCalculator({pairs})"
