# domain/entities/weight.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fast_delivery.domain.errors import RangeError, require, require_int

GRAMS_PER_KILOGRAM = 1000


@dataclass(frozen=True, order=True)
class Weight:
    grams: int

    def __post_init__(self):
        require_int(self.grams, "grams")
        if self.grams < 0:
            raise RangeError(
                f"Weight cannot be negative: {self.grams} g", value=self.grams, bound=0, unit="g"
            )

    @classmethod
    def zero(cls) -> Weight:
        return cls(0)

    @classmethod
    def from_kilograms(cls, kg: float) -> Weight:
        return cls(round(kg * GRAMS_PER_KILOGRAM))

    @property
    def kilograms(self) -> Decimal:
        return Decimal(self.grams) / GRAMS_PER_KILOGRAM

    def add(self, other: Weight) -> Weight:
        return Weight(self.grams + require(other, "other").grams)

    __add__ = add

    def is_greater_than(self, other: Weight) -> bool:
        return self > require(other, "other")

    def __str__(self) -> str:
        return f"{self.grams} g"
