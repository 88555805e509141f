# fast_delivery/policy/tariff.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from fast_delivery.domain.entities.geography import Distance
from fast_delivery.domain.entities.money import CENTS, Currency, Price, to_decimal
from fast_delivery.domain.errors import ConfigError, require
from fast_delivery.domain.shipment import Shipment

CM3_PER_M3 = Decimal(1_000_000)


def _round(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class TariffCalculator:
    """
    Prices a shipment from its total weight, total volume and distance.

    Holds only the pricing constants; every method is a pure function of the
    shipment, so one instance can be shared freely.
    """

    def __init__(
        self,
        cost_per_kilogram: Decimal,
        cost_per_cubic_centimeter: Decimal,
        minimum_price: Decimal,
        minimum_distance: Distance,
        volume_minimum_price: Decimal | None = None,
    ):
        require(cost_per_kilogram, "cost_per_kilogram")
        require(cost_per_cubic_centimeter, "cost_per_cubic_centimeter")
        require(minimum_price, "minimum_price")
        self._cost_per_kilogram = to_decimal(cost_per_kilogram)
        self._cost_per_cubic_centimeter = to_decimal(cost_per_cubic_centimeter)
        self._minimum_price = to_decimal(minimum_price)
        # the volume floor falls back to the weight floor
        self._volume_minimum_price = (
            self._minimum_price if volume_minimum_price is None else to_decimal(volume_minimum_price)
        )
        self._minimum_distance = require(minimum_distance, "minimum_distance")

        for name, v in (
            ("cost_per_kilogram", self._cost_per_kilogram),
            ("cost_per_cubic_centimeter", self._cost_per_cubic_centimeter),
            ("minimum_price", self._minimum_price),
            ("volume_minimum_price", self._volume_minimum_price),
        ):
            if v < 0:
                raise ConfigError(f"{name} must be >= 0, got {v}")
        if self._minimum_distance.kilometers <= 0:
            raise ConfigError(
                f"minimum_distance must be > 0 km, got {self._minimum_distance.kilometers} km"
            )

    @classmethod
    def per_cubic_meter(
        cls,
        cost_per_kilogram: Decimal,
        cost_per_cubic_meter: Decimal,
        minimum_price: Decimal,
        minimum_distance: Distance,
        volume_minimum_price: Decimal | None = None,
    ) -> TariffCalculator:
        per_cm3 = to_decimal(require(cost_per_cubic_meter, "cost_per_cubic_meter")) / CM3_PER_M3
        return cls(cost_per_kilogram, per_cm3, minimum_price, minimum_distance, volume_minimum_price)

    # read-only view of the constants
    @property
    def cost_per_kilogram(self) -> Decimal:
        return self._cost_per_kilogram

    @property
    def cost_per_cubic_centimeter(self) -> Decimal:
        return self._cost_per_cubic_centimeter

    @property
    def minimum_price(self) -> Decimal:
        return self._minimum_price

    @property
    def volume_minimum_price(self) -> Decimal:
        return self._volume_minimum_price

    @property
    def minimum_distance(self) -> Distance:
        return self._minimum_distance

    def minimal_price(self, currency: Currency) -> Price:
        return Price(self._minimum_price, require(currency, "currency"))

    def calc_by_weight(self, shipment: Shipment) -> Price:
        require(shipment, "shipment")
        kg = shipment.weight_all_packages().kilograms
        return Price(_round(kg * self._cost_per_kilogram), shipment.currency)

    def calc_by_volume(self, shipment: Shipment) -> Price:
        require(shipment, "shipment")
        cm3 = Decimal(shipment.volume_all_packages().cubic_centimeters)
        return Price(_round(cm3 * self._cost_per_cubic_centimeter), shipment.currency)

    def calc(self, shipment: Shipment) -> Price:
        require(shipment, "shipment")
        base = self.calc_by_weight(shipment).max(self.calc_by_volume(shipment))
        floor = Price(max(self._minimum_price, self._volume_minimum_price), shipment.currency)
        if base < floor:
            return floor
        return base

    def calc_with_distance(self, shipment: Shipment) -> Price:
        """
        Base price scaled by max(distance, minimum_distance) / minimum_distance.

        The coefficient is kept at float precision and only the final price is
        rounded (2 places, half-up), so shipments at or under the minimum
        distance pay the base price unchanged.
        """
        require(shipment, "shipment")
        base = self.calc(shipment)
        effective = max(shipment.calculate_distance(), self._minimum_distance)
        coefficient = effective.ratio_to(self._minimum_distance)
        return Price(_round(base.amount * to_decimal(coefficient)), base.currency)

    def __repr__(self) -> str:
        return (
            f"TariffCalculator(cost_per_kilogram={self._cost_per_kilogram}, "
            f"cost_per_cubic_centimeter={self._cost_per_cubic_centimeter}, "
            f"minimum_price={self._minimum_price}, volume_minimum_price={self._volume_minimum_price}, "
            f"minimum_distance={self._minimum_distance})"
        )
