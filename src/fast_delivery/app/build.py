# fast_delivery/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from fast_delivery.app.hooks import NoopHooks
from fast_delivery.app.protocols import PricingPolicy
from fast_delivery.config.models import AppModel
from fast_delivery.domain.entities.money import CurrencyFactory
from fast_delivery.domain.geographic_config import GeographicConfig
from fast_delivery.io.quote_logging import QuoteLogging  # JSON logs
from fast_delivery.io.recorder import JsonlSink, Recorder
from fast_delivery.policy.tariff import TariffCalculator
from fast_delivery.runtime.policy_factory import (
    make_currency_factory,
    make_geographic_config,
    make_pricing_policy,
    make_tariff_calculator,
)
from fast_delivery.services.quote import QuoteService


@dataclass
class App:
    config: AppModel
    geography: GeographicConfig
    calculator: TariffCalculator
    pricing: PricingPolicy
    currencies: CurrencyFactory
    quotes: QuoteService


def build(cfg: AppModel | Mapping | None = None, *, use_logging: bool = True, recorder: Recorder | None = None) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Domain configuration (raises ConfigError on an invalid region)
    geography = make_geographic_config(model.geography)
    currencies = make_currency_factory(model.currencies)

    # 2) Pricing
    calculator = make_tariff_calculator(model.cost, model.distance)
    pricing = make_pricing_policy(model.pricing, calculator=calculator)

    # 3) Hooks
    hooks = (
        QuoteLogging(
            app=model.name,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
            recorder=recorder or Recorder(JsonlSink()),
        )
        if use_logging
        else NoopHooks()
    )

    # 4) Service (inject deps explicitly)
    quotes = QuoteService(
        pricing=pricing,
        geography=geography,
        currencies=currencies,
        max_weight_grams=model.limits.max_weight_grams,
        max_side_mm=model.limits.max_side_mm,
        hooks=hooks,
    )

    return App(model, geography, calculator, pricing, currencies, quotes)
