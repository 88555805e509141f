from decimal import Decimal
from types import SimpleNamespace

from fast_delivery.app.protocols import CoordinatesValidator, PricingPolicy
from fast_delivery.domain.entities.geography import Distance
from fast_delivery.domain.entities.money import Currency, Price
from fast_delivery.domain.geographic_config import GeographicConfig
from fast_delivery.policy.pricing import DistancePricingPolicy, WeightVolumePricingPolicy

RUB = Currency("RUB")


class FakeCalculator:
    def __init__(self):
        self.calls = []

    def calc(self, shipment):
        self.calls.append("calc")
        return Price(Decimal("100"), RUB)

    def calc_with_distance(self, shipment):
        self.calls.append("calc_with_distance")
        return Price(Decimal("200"), RUB)

    def minimal_price(self, currency):
        return Price(Decimal("350"), currency)


def test_weight_volume_policy_ignores_distance():
    calc = FakeCalculator()
    policy = WeightVolumePricingPolicy(calc)
    assert policy.price(SimpleNamespace()).amount == Decimal("100")
    assert calc.calls == ["calc"]


def test_distance_policy_uses_distance():
    calc = FakeCalculator()
    policy = DistancePricingPolicy(calc)
    assert policy.price(SimpleNamespace()).amount == Decimal("200")
    assert calc.calls == ["calc_with_distance"]
    assert policy.minimal_price(RUB) == Price(Decimal("350"), RUB)


def test_policies_satisfy_protocols():
    assert isinstance(WeightVolumePricingPolicy(FakeCalculator()), PricingPolicy)
    assert isinstance(DistancePricingPolicy(FakeCalculator()), PricingPolicy)
    assert isinstance(GeographicConfig.for_russia(), CoordinatesValidator)
    assert not isinstance(Distance(1.0), PricingPolicy)
