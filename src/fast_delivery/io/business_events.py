# fast_delivery/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    app: str
    quote_id: int  # per-service sequence number
    name: str  # stable event name


@dataclass
class QuoteCalculatedBiz(BizEvent):
    currency_code: str
    total_price: str  # decimal rendered as text, keeps JSON lossless
    minimal_price: str
    policy: str


@dataclass
class QuoteRejectedBiz(BizEvent):
    error: str  # exception class name
    reason: str
