# fast_delivery/services/quote.py
import itertools
from collections.abc import Mapping

from fast_delivery.app.hooks import NoopHooks, QuoteHooks
from fast_delivery.app.protocols import CoordinatesValidator, PricingPolicy
from fast_delivery.domain.entities.dimension import OuterDimensions
from fast_delivery.domain.entities.money import CurrencyFactory
from fast_delivery.domain.entities.weight import Weight
from fast_delivery.domain.shipment import MAX_PACK_WEIGHT_G, Pack, Shipment
from fast_delivery.io.schemas import CalculatePackagesRequest, CalculatePackagesResponse


class QuoteService:
    """
    Boundary adapter: raw request data in, rounded total/minimal prices out.

    Every failure (pydantic ValidationError for malformed data, TariffError
    subclasses for out-of-range values) is reported to the hooks and re-raised
    for the caller to map onto a client error.
    """

    def __init__(
        self,
        *,
        pricing: PricingPolicy,
        geography: CoordinatesValidator,
        currencies: CurrencyFactory,
        max_weight_grams: int = MAX_PACK_WEIGHT_G,
        max_side_mm: int = 1_500,
        hooks: QuoteHooks | None = None,
    ):
        self.pricing = pricing
        self.geography = geography
        self.currencies = currencies
        self.max_weight_grams = max_weight_grams
        self.max_side_mm = max_side_mm
        self.hooks = hooks or NoopHooks()
        self._seq = itertools.count(1)

    def build_shipment(self, request: CalculatePackagesRequest) -> Shipment:
        packs = [
            Pack(
                Weight(p.weight),
                OuterDimensions.of(p.length, p.width, p.height, max_side_mm=self.max_side_mm),
                max_weight_grams=self.max_weight_grams,
            )
            for p in request.packages
        ]
        return Shipment(
            packs,
            self.currencies.create(request.currency_code),
            self.geography.point(request.departure.latitude, request.departure.longitude),
            self.geography.point(request.destination.latitude, request.destination.longitude),
        )

    def quote(self, request: CalculatePackagesRequest | Mapping) -> CalculatePackagesResponse:
        quote_id = next(self._seq)
        try:
            req = (
                request
                if isinstance(request, CalculatePackagesRequest)
                else CalculatePackagesRequest.model_validate(request)
            )
            self.hooks.quote_start(
                quote_id=quote_id, packages=len(req.packages), currency_code=req.currency_code
            )
            shipment = self.build_shipment(req)
            self.hooks.quote_details(
                quote_id=quote_id,
                weight_g=shipment.weight_all_packages().grams,
                volume_cm3=shipment.volume_all_packages().cubic_centimeters,
                distance_km=shipment.calculate_distance().kilometers,
            )
            total = self.pricing.price(shipment)
            minimal = self.pricing.minimal_price(shipment.currency)
            response = CalculatePackagesResponse.from_prices(total, minimal)
        except Exception as exc:
            self.hooks.quote_rejected(quote_id=quote_id, exc=exc)
            raise
        self.hooks.quote_done(
            quote_id=quote_id, total=total, minimal=minimal, policy=type(self.pricing).__name__
        )
        return response
