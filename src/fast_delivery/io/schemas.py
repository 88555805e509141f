# fast_delivery/io/schemas.py
"""Plain-data shapes at the boundary of the pricing core."""

from decimal import ROUND_CEILING, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from fast_delivery.domain.entities.money import CENTS, Price


class CargoPackage(BaseModel):
    model_config = ConfigDict(extra="forbid")
    weight: int = Field(ge=0)  # grams
    length: int = Field(ge=0)  # mm
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class PointRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    latitude: float
    longitude: float


class CalculatePackagesRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    packages: list[CargoPackage] = Field(min_length=1)
    currency_code: str
    departure: PointRequest
    destination: PointRequest


class CalculatePackagesResponse(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    total_price: Decimal
    minimal_price: Decimal
    currency_code: str

    @classmethod
    def from_prices(cls, total: Price, minimal: Price) -> "CalculatePackagesResponse":
        if total.currency != minimal.currency:
            raise ValueError("Currency codes must be the same")
        return cls(
            total_price=total.amount.quantize(CENTS, rounding=ROUND_CEILING),
            minimal_price=minimal.amount.quantize(CENTS, rounding=ROUND_CEILING),
            currency_code=total.currency.code,
        )

    @field_serializer("total_price", "minimal_price")
    def _as_str(self, v: Decimal) -> str:
        return str(v)
