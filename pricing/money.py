from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .errors import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value, field: str = "amount") -> Decimal:
    """
    Приводит число к Decimal.
    float идёт через str(), чтобы 32.95 не превратилось в 32.9500000000000028...
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"{field} must be a number, got {value!r}") from None
    else:
        raise ValidationError(f"{field} must be a number, got {value!r}")

    if not result.is_finite():
        raise ValidationError(f"{field} must be finite, got {value!r}")
    return result


def round_money(value) -> Decimal:
    """Округление до копеек (центов), половина вверх от нуля"""
    return to_money(value).quantize(CENT, rounding=ROUND_HALF_UP)
