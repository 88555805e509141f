from __future__ import annotations

import math
from dataclasses import InitVar, dataclass

from fast_delivery.domain.errors import DivideByZeroError, RangeError, require

EARTH_RADIUS_KM = 6371.0
MAX_DISTANCE_KM = 20_000.0  # roughly half the circumference
KM_TO_MILES = 0.621371


# Core geo types used by shipments and the tariff calculator
@dataclass(frozen=True, order=True)
class Coordinate:
    value: float  # degrees
    min_value: InitVar[float] = -180.0
    max_value: InitVar[float] = 180.0

    def __post_init__(self, min_value: float, max_value: float):
        require(self.value, "value")
        if not (min_value <= self.value <= max_value):
            bound = min_value if self.value < min_value else max_value
            raise RangeError(
                f"Coordinate {self.value:.6f} not in range [{min_value:.2f}, {max_value:.2f}]",
                value=self.value,
                bound=bound,
                unit="deg",
            )

    @classmethod
    def latitude(cls, lat: float, min_lat: float = -90.0, max_lat: float = 90.0) -> Coordinate:
        return cls(lat, min_lat, max_lat)

    @classmethod
    def longitude(cls, lon: float, min_lon: float = -180.0, max_lon: float = 180.0) -> Coordinate:
        return cls(lon, min_lon, max_lon)

    def difference_from(self, other: Coordinate) -> float:
        return abs(self.value - require(other, "other").value)

    def __str__(self) -> str:
        return f"{self.value:.6f}°"


@dataclass(frozen=True)
class GeoPoint:
    latitude: Coordinate
    longitude: Coordinate

    def __post_init__(self):
        require(self.latitude, "latitude")
        require(self.longitude, "longitude")

    @classmethod
    def of(
        cls,
        lat: float,
        lon: float,
        min_lat: float = -90.0,
        max_lat: float = 90.0,
        min_lon: float = -180.0,
        max_lon: float = 180.0,
    ) -> GeoPoint:
        return cls(Coordinate.latitude(lat, min_lat, max_lat), Coordinate.longitude(lon, min_lon, max_lon))

    def is_at_same_location(self, other: GeoPoint) -> bool:
        require(other, "other")
        return self.latitude == other.latitude and self.longitude == other.longitude

    def latitude_difference_from(self, other: GeoPoint) -> float:
        return self.latitude.difference_from(require(other, "other").latitude)

    def longitude_difference_from(self, other: GeoPoint) -> float:
        return self.longitude.difference_from(require(other, "other").longitude)

    def __str__(self) -> str:
        return f"[{self.latitude}, {self.longitude}]"


@dataclass(frozen=True, order=True)
class Distance:
    kilometers: float

    def __post_init__(self):
        require(self.kilometers, "kilometers")
        if self.kilometers < 0:
            raise RangeError(
                f"Distance cannot be negative: {self.kilometers:.2f} km",
                value=self.kilometers,
                bound=0.0,
                unit="km",
            )
        if not self.kilometers <= MAX_DISTANCE_KM:
            raise RangeError(
                f"Distance {self.kilometers:.2f} km exceeds maximum {MAX_DISTANCE_KM:.2f} km",
                value=self.kilometers,
                bound=MAX_DISTANCE_KM,
                unit="km",
            )

    @classmethod
    def calculate(cls, from_: GeoPoint, to: GeoPoint) -> Distance:
        """Great-circle distance between two points (Haversine, spherical Earth)."""
        require(from_, "from point")
        require(to, "to point")
        lat1, lon1 = from_.latitude.value, from_.longitude.value
        lat2, lon2 = to.latitude.value, to.longitude.value

        phi1, phi2 = math.radians(lat1), math.radians(lat2)
        dphi = math.radians(lat2 - lat1)
        dlmb = math.radians(lon2 - lon1)

        a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
        c = 2 * math.asin(math.sqrt(min(1.0, a)))
        km = EARTH_RADIUS_KM * c
        return cls(max(0.0, km))

    @property
    def meters(self) -> float:
        return self.kilometers * 1000.0

    @property
    def miles(self) -> float:
        return self.kilometers * KM_TO_MILES

    def add(self, other: Distance) -> Distance:
        return Distance(self.kilometers + require(other, "other").kilometers)

    __add__ = add

    def ratio_to(self, other: Distance) -> float:
        require(other, "other")
        if other.kilometers == 0:
            raise DivideByZeroError("Cannot divide by zero distance")
        return self.kilometers / other.kilometers

    def is_approximately_equal_to(self, other: Distance, tolerance: float) -> bool:
        return abs(self.kilometers - require(other, "other").kilometers) <= tolerance

    def __str__(self) -> str:
        return f"{self.kilometers:.2f} km"
