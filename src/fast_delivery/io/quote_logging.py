# io/quote_logging.py
import json
import logging
import sys

from fast_delivery.app.hooks import NoopHooks
from fast_delivery.io.business_events import QuoteCalculatedBiz, QuoteRejectedBiz
from fast_delivery.io.recorder import Recorder


def _default_json_logger(name="fast_delivery", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class QuoteLogging(NoopHooks):
    """
    One place to shape and emit structured logs for quote requests,
    plus business events for the recorder.
    """

    def __init__(
        self,
        app: str = "fast-delivery",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.app, self.debug = app, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"app": self.app, **extra}})

    # ------------- Quote lifecycle --------------------------

    def quote_start(self, *, quote_id, packages, currency_code):
        self._emit("INFO", "quote_start", quote_id=quote_id, packages=packages, currency=currency_code)

    def quote_details(self, *, quote_id, weight_g, volume_cm3, distance_km):
        if self.debug:
            self._emit(
                "DEBUG",
                "quote_details",
                quote_id=quote_id,
                weight_g=weight_g,
                volume_cm3=volume_cm3,
                distance_km=round(distance_km, 3),
            )

    def quote_done(self, *, quote_id, total, minimal, policy):
        self._emit(
            "INFO",
            "quote_done",
            quote_id=quote_id,
            total=str(total.amount),
            minimal=str(minimal.amount),
            currency=total.currency.code,
            policy=policy,
        )
        if self.recorder:
            self.recorder.emit(
                QuoteCalculatedBiz(
                    app=self.app,
                    quote_id=quote_id,
                    name="QuoteCalculated",
                    currency_code=total.currency.code,
                    total_price=str(total.amount),
                    minimal_price=str(minimal.amount),
                    policy=policy,
                )
            )

    def quote_rejected(self, *, quote_id, exc: BaseException):
        error = type(exc).__name__
        self._emit("WARNING", "quote_rejected", quote_id=quote_id, error=error, reason=str(exc))
        if self.recorder:
            self.recorder.emit(
                QuoteRejectedBiz(
                    app=self.app, quote_id=quote_id, name="QuoteRejected", error=error, reason=str(exc)
                )
            )
