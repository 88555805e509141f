# domain/entities/dimension.py
from __future__ import annotations

from dataclasses import InitVar, dataclass

from fast_delivery.domain.errors import RangeError, require, require_int

MAX_LENGTH_MM = 9999
MAX_VOLUME_CM3 = 1_000_000
NORMALIZATION_STEP_MM = 50
MM_PER_CM = 10


def normalize_by_50(mm: int) -> int:
    """Round mm up to the next multiple of 50 (unchanged if already a multiple)."""
    rem = mm % NORMALIZATION_STEP_MM
    if rem == 0:
        return mm
    return mm - rem + NORMALIZATION_STEP_MM


@dataclass(frozen=True, order=True)
class Length:
    millimeters: int

    def __post_init__(self):
        require_int(self.millimeters, "millimeters")
        if self.millimeters < 0:
            raise RangeError(
                f"Length cannot be negative: {self.millimeters} mm",
                value=self.millimeters,
                bound=0,
                unit="mm",
            )
        if self.millimeters > MAX_LENGTH_MM:
            raise RangeError(
                f"Length {self.millimeters} mm exceeds maximum {MAX_LENGTH_MM} mm",
                value=self.millimeters,
                bound=MAX_LENGTH_MM,
                unit="mm",
            )

    @classmethod
    def from_millimeters(cls, mm: int) -> Length:
        return cls(int(mm))

    @classmethod
    def from_centimeters(cls, cm: float) -> Length:
        return cls(round(cm * MM_PER_CM))

    @property
    def centimeters(self) -> float:
        return self.millimeters / MM_PER_CM

    def normalized(self) -> Length:
        """Side rounded up to 50 mm; lengths above 9950 mm overflow the cap."""
        return Length(normalize_by_50(self.millimeters))

    def is_longer_than(self, other: Length) -> bool:
        return self > require(other, "other")

    def is_shorter_than(self, other: Length) -> bool:
        return self < require(other, "other")

    def __str__(self) -> str:
        return f"{self.millimeters} mm"


@dataclass(frozen=True, order=True)
class Volume:
    cubic_centimeters: int

    def __post_init__(self):
        require_int(self.cubic_centimeters, "cubic_centimeters")
        if self.cubic_centimeters < 0:
            raise RangeError(
                f"Volume cannot be negative: {self.cubic_centimeters} cm3",
                value=self.cubic_centimeters,
                bound=0,
                unit="cm3",
            )
        if self.cubic_centimeters > MAX_VOLUME_CM3:
            raise RangeError(
                f"Volume {self.cubic_centimeters} cm3 exceeds maximum {MAX_VOLUME_CM3} cm3",
                value=self.cubic_centimeters,
                bound=MAX_VOLUME_CM3,
                unit="cm3",
            )

    @classmethod
    def zero(cls) -> Volume:
        return cls(0)

    @classmethod
    def from_cubic_meters(cls, m3: float) -> Volume:
        if m3 < 0:
            raise RangeError(
                f"Volume cannot be negative: {m3:.6f} m3", value=m3, bound=0, unit="m3"
            )
        return cls(round(m3 * 1_000_000))

    @property
    def cubic_meters(self) -> float:
        return self.cubic_centimeters / 1_000_000

    def add(self, other: Volume) -> Volume:
        return Volume(self.cubic_centimeters + require(other, "other").cubic_centimeters)

    __add__ = add

    def __str__(self) -> str:
        return f"{self.cubic_centimeters} cm3"


@dataclass(frozen=True)
class OuterDimensions:
    length: Length
    width: Length
    height: Length
    max_side_mm: InitVar[int] = MAX_LENGTH_MM

    def __post_init__(self, max_side_mm: int):
        for name in ("length", "width", "height"):
            side = require(getattr(self, name), name)
            if side.millimeters > max_side_mm:
                raise RangeError(
                    f"{name.capitalize()} {side.millimeters} mm exceeds maximum allowed "
                    f"value {max_side_mm} mm",
                    value=side.millimeters,
                    bound=max_side_mm,
                    unit="mm",
                )

    @classmethod
    def of(cls, length_mm: int, width_mm: int, height_mm: int, *, max_side_mm: int = MAX_LENGTH_MM):
        return cls(
            Length(length_mm), Length(width_mm), Length(height_mm), max_side_mm=max_side_mm
        )

    @property
    def sides(self) -> tuple[Length, Length, Length]:
        return self.length, self.width, self.height

    def calculate_volume(self) -> Volume:
        """
        Billable volume: every side rounded up to 50 mm, truncated to whole
        centimetres, multiplied. Valid sides can still overflow the Volume cap.
        """
        cm = [normalize_by_50(s.millimeters) // MM_PER_CM for s in self.sides]
        return Volume(cm[0] * cm[1] * cm[2])

    def normalized(self) -> OuterDimensions:
        return OuterDimensions(
            self.length.normalized(), self.width.normalized(), self.height.normalized()
        )

    @property
    def longest_side(self) -> Length:
        return max(self.sides)

    @property
    def shortest_side(self) -> Length:
        return min(self.sides)

    def sum_of_dimensions(self) -> int:
        return sum(s.millimeters for s in self.sides)
