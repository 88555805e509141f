# domain/geographic_config.py
from __future__ import annotations

from dataclasses import dataclass

from fast_delivery.domain.entities.geography import GeoPoint
from fast_delivery.domain.errors import ConfigError, RangeError, require


@dataclass(frozen=True)
class GeographicConfig:
    """
    Operational region as a lat/lon bounding box.

    Departure and destination points must fall inside it. Built once from
    configuration and shared read-only between callers.
    """

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    def __post_init__(self):
        for name in ("min_latitude", "max_latitude", "min_longitude", "max_longitude"):
            require(getattr(self, name), name)
        if not self.min_latitude < self.max_latitude:
            raise ConfigError(
                "min_latitude must be less than max_latitude. "
                f"Got: {self.min_latitude} >= {self.max_latitude}"
            )
        if not self.min_longitude < self.max_longitude:
            raise ConfigError(
                "min_longitude must be less than max_longitude. "
                f"Got: {self.min_longitude} >= {self.max_longitude}"
            )
        if not (-90 <= self.min_latitude and self.max_latitude <= 90):
            raise ConfigError(
                "Latitude must be between -90 and 90. "
                f"Got: {self.min_latitude} to {self.max_latitude}"
            )
        if not (-180 <= self.min_longitude and self.max_longitude <= 180):
            raise ConfigError(
                "Longitude must be between -180 and 180. "
                f"Got: {self.min_longitude} to {self.max_longitude}"
            )

    @classmethod
    def for_russia(cls) -> GeographicConfig:
        return cls(45.0, 65.0, 30.0, 96.0)

    def validate_latitude(self, latitude: float) -> None:
        require(latitude, "latitude")
        if not (self.min_latitude <= latitude <= self.max_latitude):
            raise RangeError(
                f"Latitude {latitude:.4f} is outside valid range "
                f"[{self.min_latitude:.1f}, {self.max_latitude:.1f}]",
                value=latitude,
                bound=(self.min_latitude, self.max_latitude),
                unit="deg",
            )

    def validate_longitude(self, longitude: float) -> None:
        require(longitude, "longitude")
        if not (self.min_longitude <= longitude <= self.max_longitude):
            raise RangeError(
                f"Longitude {longitude:.4f} is outside valid range "
                f"[{self.min_longitude:.1f}, {self.max_longitude:.1f}]",
                value=longitude,
                bound=(self.min_longitude, self.max_longitude),
                unit="deg",
            )

    def validate_coordinates(self, latitude: float, longitude: float) -> None:
        self.validate_latitude(latitude)
        self.validate_longitude(longitude)

    def point(self, latitude: float, longitude: float) -> GeoPoint:
        self.validate_coordinates(latitude, longitude)
        return GeoPoint.of(
            latitude,
            longitude,
            self.min_latitude,
            self.max_latitude,
            self.min_longitude,
            self.max_longitude,
        )

    def contains(self, p: GeoPoint) -> bool:
        require(p, "point")
        lat, lon = p.latitude.value, p.longitude.value
        return (
            self.min_latitude <= lat <= self.max_latitude
            and self.min_longitude <= lon <= self.max_longitude
        )

    def __str__(self) -> str:
        return (
            f"GeographicConfig{{latitude=[{self.min_latitude:.1f}, {self.max_latitude:.1f}], "
            f"longitude=[{self.min_longitude:.1f}, {self.max_longitude:.1f}]}}"
        )
