# app/hooks.py
from typing import Protocol


class QuoteHooks(Protocol):
    def quote_start(self, *, quote_id, packages, currency_code): ...
    def quote_details(self, *, quote_id, weight_g, volume_cm3, distance_km): ...
    def quote_done(self, *, quote_id, total, minimal, policy): ...
    def quote_rejected(self, *, quote_id, exc: BaseException): ...


class NoopHooks:
    def quote_start(self, **_):
        pass

    def quote_details(self, **_):
        pass

    def quote_done(self, **_):
        pass

    def quote_rejected(self, **_):
        pass
