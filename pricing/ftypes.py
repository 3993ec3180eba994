# pricing/ftypes.py
# Maybe и Either для безопасных операций над каталогом и корзиной:
# вместо исключения вызывающий код получает значение, которое можно map/bind.

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, Type, TypeVar, Union

from .errors import BasketError

T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    Значение, которого может не быть (поиск товара по коду).
    Maybe.some(value) / Maybe.nothing() / Maybe.from_optional(value)
    """

    value: Optional[T]

    @staticmethod
    def some(value: T) -> "Maybe[T]":
        return Maybe(value)

    @staticmethod
    def nothing() -> "Maybe[T]":
        return Maybe(None)

    @staticmethod
    def from_optional(value: Optional[T]) -> "Maybe[T]":
        return Maybe.nothing() if value is None else Maybe.some(value)

    def is_some(self) -> bool:
        return self.value is not None

    def is_none(self) -> bool:
        return self.value is None

    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        return Maybe.from_optional(fn(self.value)) if self.is_some() else Maybe.nothing()

    def bind(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return fn(self.value) if self.is_some() else Maybe.nothing()

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default

    def to_either(self, error: L) -> "Either[L, T]":
        """Nothing превращается в Left(error)"""
        return Either.right(self.value) if self.is_some() else Either.left(error)

    def __repr__(self) -> str:
        return f"Some({self.value!r})" if self.is_some() else "Nothing"


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """
    Left: ошибка (обычно dict с ключом "error"), Right: успешный результат.
    Either.left(err) / Either.right(val) / Either.attempt(fn, ...)
    """

    is_left: bool
    value: Union[L, R]

    @staticmethod
    def left(value: L) -> "Either[L, R]":
        return Either(True, value)

    @staticmethod
    def right(value: R) -> "Either[L, R]":
        return Either(False, value)

    @staticmethod
    def attempt(
        fn: Callable[[], R],
        errors: Tuple[Type[Exception], ...] = (BasketError,),
    ) -> "Either[dict, R]":
        """
        Выполняет fn(); перечисленные исключения превращаются в Left,
        остальные пробрасываются дальше.
        """
        try:
            return Either.right(fn())
        except errors as exc:
            error = {"error": str(exc), "kind": type(exc).__name__}
            code = getattr(exc, "code", None)
            if code is not None:
                error["code"] = code
            return Either.left(error)

    @property
    def is_right(self) -> bool:
        return not self.is_left

    def map(self, fn: Callable[[R], U]) -> "Either[L, U]":
        return Either.right(fn(self.value)) if self.is_right else self  # type: ignore[return-value]

    def map_left(self, fn: Callable[[L], U]) -> "Either[U, R]":
        return Either.left(fn(self.value)) if self.is_left else self  # type: ignore[return-value]

    def bind(self, fn: Callable[[R], "Either[L, U]"]) -> "Either[L, U]":
        return fn(self.value) if self.is_right else self  # type: ignore[return-value]

    def get_or_else(self, default: U) -> R | U:
        return self.value if self.is_right else default  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"Left({self.value!r})" if self.is_left else f"Right({self.value!r})"
