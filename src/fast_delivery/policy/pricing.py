# fast_delivery/policy/pricing.py

from fast_delivery.app.protocols import PricingPolicy
from fast_delivery.domain.entities.money import Currency, Price
from fast_delivery.domain.shipment import Shipment
from fast_delivery.policy.tariff import TariffCalculator


class WeightVolumePricingPolicy(PricingPolicy):
    """max(weight price, volume price), floored at the minimum; distance ignored."""

    def __init__(self, calculator: TariffCalculator):
        self.calculator = calculator

    def price(self, shipment: Shipment) -> Price:
        return self.calculator.calc(shipment)

    def minimal_price(self, currency: Currency) -> Price:
        return self.calculator.minimal_price(currency)


class DistancePricingPolicy(WeightVolumePricingPolicy):
    def price(self, shipment: Shipment) -> Price:
        return self.calculator.calc_with_distance(shipment)
