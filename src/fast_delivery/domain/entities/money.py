# domain/entities/money.py
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import total_ordering

from fast_delivery.domain.errors import RangeError, UnknownCurrencyError, require

_CODE = re.compile(r"^[A-Z]{3}$")
CENTS = Decimal("0.01")


def to_decimal(v) -> Decimal:
    # floats go through repr so 0.1 stays 0.1
    return v if isinstance(v, Decimal) else Decimal(str(v))


@dataclass(frozen=True)
class Currency:
    code: str

    def __post_init__(self):
        require(self.code, "code")
        if not _CODE.match(self.code):
            raise UnknownCurrencyError(f"Currency code must be three upper-case letters, got {self.code!r}")

    def __str__(self) -> str:
        return self.code


class CurrencyFactory:
    """Resolves three-letter codes against the configured set of currencies."""

    def __init__(self, allowed: Iterable[str]):
        self.allowed = frozenset(allowed)

    def is_available(self, code: str) -> bool:
        return code in self.allowed

    def create(self, code: str) -> Currency:
        require(code, "currency code")
        if not self.is_available(code):
            raise UnknownCurrencyError(f"Currency code {code!r} is not available")
        return Currency(code)


@total_ordering
@dataclass(frozen=True)
class Price:
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        require(self.amount, "amount")
        require(self.currency, "currency")
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.amount < 0:
            raise RangeError(
                f"Price cannot be negative: {self.amount} {self.currency}",
                value=self.amount,
                bound=0,
                unit=self.currency.code,
            )

    def _check(self, other: Price) -> Price:
        require(other, "other")
        if self.currency != other.currency:
            raise ValueError(
                f"Currency codes must be the same: {self.currency} != {other.currency}"
            )
        return other

    def __lt__(self, other: Price) -> bool:
        return self.amount < self._check(other).amount

    def max(self, other: Price) -> Price:
        return self if self >= other else other

    def multiply(self, factor) -> Price:
        return Price(self.amount * to_decimal(factor), self.currency)

    def rounded(self, places: int = 2, rounding: str = ROUND_HALF_UP) -> Price:
        return Price(self.amount.quantize(Decimal(1).scaleb(-places), rounding=rounding), self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"
