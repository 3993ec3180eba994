class BasketError(Exception):
    """Базовая ошибка ценообразования корзины"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BasketError, ValueError):
    """Невалидные данные при создании объекта (товар, оффер, тарифы доставки)"""


class ProductNotFoundError(BasketError, LookupError):
    """Кода товара нет в каталоге"""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or f"Product with code '{code}' not found")
        self.code = code


class InvalidProductError(ProductNotFoundError):
    """Попытка положить в корзину товар, которого нет в каталоге"""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Product code '{code}' not found in catalog")


class ConfigurationError(BasketError, RuntimeError):
    """Ни один тариф доставки не подошёл: тарифы настроены неверно"""
