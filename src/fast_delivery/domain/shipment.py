# fast_delivery/domain/shipment.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import InitVar, dataclass
from functools import reduce

from fast_delivery.domain.entities.dimension import OuterDimensions, Volume
from fast_delivery.domain.entities.geography import Distance, GeoPoint
from fast_delivery.domain.entities.money import Currency
from fast_delivery.domain.entities.weight import Weight
from fast_delivery.domain.errors import MissingInputError, RangeError, require

MAX_PACK_WEIGHT_G = 150_000


@dataclass(frozen=True)
class Pack:
    weight: Weight
    dimensions: OuterDimensions
    max_weight_grams: InitVar[int] = MAX_PACK_WEIGHT_G

    def __post_init__(self, max_weight_grams: int):
        require(self.weight, "weight")
        require(self.dimensions, "dimensions")
        if self.weight.grams > max_weight_grams:
            raise RangeError(
                f"Package can't be more than {max_weight_grams} g, got {self.weight.grams} g",
                value=self.weight.grams,
                bound=max_weight_grams,
                unit="g",
            )

    @property
    def volume(self) -> Volume:
        return self.dimensions.calculate_volume()


@dataclass(frozen=True)
class Shipment:
    packages: tuple[Pack, ...]
    currency: Currency
    departure: GeoPoint
    destination: GeoPoint

    def __post_init__(self):
        packages: Sequence[Pack] | None = self.packages
        if not packages:
            raise MissingInputError("Shipment must contain at least one package")
        if any(p is None for p in packages):
            raise MissingInputError("packages must not contain None")
        # own a private copy of the list
        object.__setattr__(self, "packages", tuple(packages))
        require(self.currency, "currency")
        require(self.departure, "departure")
        require(self.destination, "destination")

    def weight_all_packages(self) -> Weight:
        return reduce(Weight.add, (p.weight for p in self.packages), Weight.zero())

    def volume_all_packages(self) -> Volume:
        # each partial sum is checked against the Volume cap
        return reduce(Volume.add, (p.volume for p in self.packages), Volume.zero())

    def calculate_distance(self) -> Distance:
        return Distance.calculate(self.departure, self.destination)
