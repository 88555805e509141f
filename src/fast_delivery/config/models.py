import re
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- TARIFF CONSTANTS ---------------------


class CostModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    per_kilogram: Decimal = Decimal("400")
    per_volume: Decimal = Decimal("0.1")
    volume_unit: Literal["cm3", "m3"] = "cm3"  # unit that per_volume is quoted in
    minimal_price: Decimal = Decimal("350")
    volume_minimal_price: Decimal | None = None  # floor for the volume tariff; None reuses minimal_price

    @field_validator("per_kilogram", "per_volume", "minimal_price", "volume_minimal_price")
    @classmethod
    def _nonneg(cls, v: Decimal | None, info: ValidationInfo) -> Decimal | None:
        if v is not None and v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class DistanceModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    minimal_km: float = Field(default=450.0, gt=0.0, le=20_000.0)


class GeographyModel(BaseModel):
    """Raw bounding box; invariants are enforced by GeographicConfig itself."""

    model_config = ConfigDict(extra="forbid")
    min_latitude: float = 45.0
    max_latitude: float = 65.0
    min_longitude: float = 30.0
    max_longitude: float = 96.0


class PackageLimitsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_weight_grams: int = Field(default=150_000, gt=0)
    max_side_mm: int = Field(default=1_500, gt=0, le=9_999)


class CurrencyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    codes: list[str] = Field(default_factory=lambda: ["RUB"], min_length=1)

    @field_validator("codes")
    @classmethod
    def _iso_codes(cls, v: list[str]) -> list[str]:
        bad = [c for c in v if not _CURRENCY_CODE.match(c)]
        if bad:
            raise ValueError(f"currency codes must be three upper-case letters, got {bad}")
        return v


# ------------------ POLICIES -----------------------------


class PricingPolicyWeightVolumeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["weight_volume"] = "weight_volume"


class PricingPolicyDistanceModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["weight_volume_distance"] = "weight_volume_distance"


PricingPolicyUnion = Annotated[
    PricingPolicyWeightVolumeModel | PricingPolicyDistanceModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "fast-delivery"
    log: LogModel = LogModel()
    cost: CostModel = CostModel()
    distance: DistanceModel = DistanceModel()
    geography: GeographyModel = GeographyModel()
    limits: PackageLimitsModel = PackageLimitsModel()
    currencies: CurrencyModel = Field(default_factory=CurrencyModel)
    pricing: PricingPolicyUnion = Field(default_factory=PricingPolicyDistanceModel)
