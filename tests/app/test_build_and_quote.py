# tests/app/test_build_and_quote.py
from decimal import Decimal

import pytest
from pydantic import ValidationError

from fast_delivery.app.build import build
from fast_delivery.domain.entities.geography import Distance
from fast_delivery.domain.errors import ConfigError, RangeError, UnknownCurrencyError
from fast_delivery.io.schemas import CalculatePackagesResponse
from fast_delivery.policy.pricing import DistancePricingPolicy, WeightVolumePricingPolicy

MOSCOW = {"latitude": 55.7558, "longitude": 37.6173}
NEAR_MOSCOW = {"latitude": 55.8, "longitude": 37.7}
SAINT_PETERSBURG = {"latitude": 59.9311, "longitude": 30.3609}


def request(packages=None, currency="RUB", departure=MOSCOW, destination=NEAR_MOSCOW):
    return {
        "packages": packages or [{"weight": 4564, "length": 100, "width": 200, "height": 300}],
        "currency_code": currency,
        "departure": departure,
        "destination": destination,
    }


@pytest.fixture
def app():
    return build(use_logging=False)


def test_build_defaults(app):
    assert isinstance(app.pricing, DistancePricingPolicy)
    assert app.calculator.minimum_distance == Distance(450.0)
    assert app.currencies.is_available("RUB")
    assert str(app.geography) == "GeographicConfig{latitude=[45.0, 65.0], longitude=[30.0, 96.0]}"


def test_quote_short_hop(app):
    resp = app.quotes.quote(request())
    assert isinstance(resp, CalculatePackagesResponse)
    assert resp.total_price == Decimal("1825.60")
    assert resp.minimal_price == Decimal("350.00")
    assert resp.currency_code == "RUB"
    assert resp.model_dump(mode="json") == {
        "total_price": "1825.60",
        "minimal_price": "350.00",
        "currency_code": "RUB",
    }


def test_quote_long_haul_costs_more(app):
    resp = app.quotes.quote(request(destination=SAINT_PETERSBURG))
    assert resp.total_price > Decimal("1825.60")
    assert resp.total_price == resp.total_price.quantize(Decimal("0.01"))


def test_weight_volume_policy_from_config():
    app = build({"pricing": {"kind": "weight_volume"}}, use_logging=False)
    assert isinstance(app.pricing, WeightVolumePricingPolicy)
    resp = app.quotes.quote(request(destination=SAINT_PETERSBURG))
    assert resp.total_price == Decimal("1825.60")


def test_small_parcel_pays_minimum(app):
    resp = app.quotes.quote(request([{"weight": 100, "length": 50, "width": 50, "height": 50}]))
    assert resp.total_price == Decimal("350.00")


def test_unknown_currency_is_rejected(app):
    with pytest.raises(UnknownCurrencyError):
        app.quotes.quote(request(currency="USD"))


def test_point_outside_region_is_rejected(app):
    with pytest.raises(RangeError) as ei:
        app.quotes.quote(request(destination={"latitude": 40.0, "longitude": 37.0}))
    assert "Latitude 40.0000" in str(ei.value)


def test_package_limits_come_from_config(app):
    with pytest.raises(RangeError):
        app.quotes.quote(request([{"weight": 150_001, "length": 10, "width": 10, "height": 10}]))
    with pytest.raises(RangeError):
        app.quotes.quote(request([{"weight": 10, "length": 1501, "width": 10, "height": 10}]))

    roomy = build({"limits": {"max_side_mm": 2000}}, use_logging=False)
    resp = roomy.quotes.quote(request([{"weight": 10, "length": 1501, "width": 10, "height": 10}]))
    assert resp.total_price == Decimal("387.50")


def test_volume_overflow_is_rejected(app):
    with pytest.raises(RangeError):
        app.quotes.quote(request([{"weight": 10, "length": 1500, "width": 1500, "height": 1500}]))


@pytest.mark.parametrize(
    "broken",
    [
        {"packages": []},
        {"packages": [{"weight": -1, "length": 1, "width": 1, "height": 1}]},
        {"packages": [{"weight": 1, "length": 1, "width": 1}]},
        {"departure": {"latitude": "north", "longitude": 37.0}},
        {"colour": "red"},
    ],
)
def test_malformed_request_is_validation_error(app, broken):
    with pytest.raises(ValidationError):
        app.quotes.quote({**request(), **broken})


def test_invalid_region_fails_at_build():
    with pytest.raises(ConfigError):
        build({"geography": {"min_latitude": 65.0, "max_latitude": 45.0}}, use_logging=False)


def test_build_accepts_model_instance(app):
    again = build(app.config, use_logging=False)
    assert again.config is app.config


def test_nan_coordinate_is_a_region_error(app):
    with pytest.raises(RangeError) as ei:
        app.quotes.quote(request(departure={"latitude": float("nan"), "longitude": 37.6173}))
    assert "Latitude nan is outside valid range" in str(ei.value)


def test_volume_minimum_applies_to_quotes():
    app = build({"cost": {"volume_minimal_price": 500}}, use_logging=False)
    resp = app.quotes.quote(request([{"weight": 100, "length": 50, "width": 50, "height": 50}]))
    assert resp.total_price == Decimal("500.00")
    assert resp.minimal_price == Decimal("350.00")
