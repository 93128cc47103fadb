from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal

CURRENCY_PLACES = 2
DISTANCE_PLACES = 3


def to_decimal(amount: Decimal | float | int | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # str() gives the shortest repr, so 2.4999 stays 2.4999 instead of its binary expansion.
        return Decimal(str(amount))
    return Decimal(amount)


@dataclass(frozen=True)
class DecimalValue:
    """A number truncated to a fixed count of decimal places.

    Truncation always floors the scaled amount, so negative amounts move away
    from zero: ``DecimalValue(-1.2349, 2).value()`` is ``-1.24``.
    """

    amount: Decimal
    decimal_places: int

    def __init__(self, amount: Decimal | float | int | str, decimal_places: int):
        object.__setattr__(self, "amount", to_decimal(amount))
        object.__setattr__(self, "decimal_places", int(decimal_places))

    def value(self) -> Decimal:
        if not self.amount.is_finite():
            return self.amount
        exponent = Decimal(1).scaleb(-self.decimal_places)
        return self.amount.quantize(exponent, rounding=ROUND_FLOOR)

    def to_currency(self, unit_prefix: str) -> str:
        return f"{unit_prefix}{self.value():.{CURRENCY_PLACES}f}"

    def to_distance(self, unit_suffix: str) -> str:
        return f"{self.value():.{DISTANCE_PLACES}f}{unit_suffix}"
