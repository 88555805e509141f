from typing import Protocol, runtime_checkable

from fast_delivery.domain.entities.geography import GeoPoint
from fast_delivery.domain.entities.money import Currency, Price
from fast_delivery.domain.shipment import Shipment


# --------------- Policies -------------------------


@runtime_checkable
class PricingPolicy(Protocol):
    """
    Responsibilities:
      • Turn a validated Shipment into its final Price.
      • Report the floor price quoted alongside it.
    """

    def price(self, shipment: Shipment) -> Price: ...
    def minimal_price(self, currency: Currency) -> Price: ...


# --------------- Geography -------------------------


@runtime_checkable
class CoordinatesValidator(Protocol):
    """
    Checks raw decimal degrees against the operational region and builds
    points bound to it. Fails with RangeError outside the region.
    """

    def validate_coordinates(self, latitude: float, longitude: float) -> None: ...
    def point(self, latitude: float, longitude: float) -> GeoPoint: ...
