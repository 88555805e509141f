from fast_delivery.app.protocols import PricingPolicy
from fast_delivery.config.models import (
    CostModel,
    CurrencyModel,
    DistanceModel,
    GeographyModel,
    PricingPolicyDistanceModel,
    PricingPolicyUnion,
    PricingPolicyWeightVolumeModel,
)
from fast_delivery.domain.entities.geography import Distance
from fast_delivery.domain.entities.money import CurrencyFactory
from fast_delivery.domain.geographic_config import GeographicConfig
from fast_delivery.policy.pricing import DistancePricingPolicy, WeightVolumePricingPolicy
from fast_delivery.policy.tariff import TariffCalculator


def make_tariff_calculator(cost: CostModel, distance: DistanceModel) -> TariffCalculator:
    minimum_distance = Distance(distance.minimal_km)
    if cost.volume_unit == "m3":
        return TariffCalculator.per_cubic_meter(
            cost.per_kilogram,
            cost.per_volume,
            cost.minimal_price,
            minimum_distance,
            cost.volume_minimal_price,
        )
    return TariffCalculator(
        cost.per_kilogram, cost.per_volume, cost.minimal_price, minimum_distance, cost.volume_minimal_price
    )


def make_geographic_config(cfg: GeographyModel) -> GeographicConfig:
    return GeographicConfig(
        cfg.min_latitude, cfg.max_latitude, cfg.min_longitude, cfg.max_longitude
    )


def make_currency_factory(cfg: CurrencyModel) -> CurrencyFactory:
    return CurrencyFactory(cfg.codes)


def make_pricing_policy(cfg: PricingPolicyUnion, *, calculator: TariffCalculator) -> PricingPolicy:
    if isinstance(cfg, PricingPolicyDistanceModel):
        return DistancePricingPolicy(calculator)
    elif isinstance(cfg, PricingPolicyWeightVolumeModel):
        return WeightVolumePricingPolicy(calculator)
    else:
        raise TypeError(cfg)
