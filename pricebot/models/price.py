from typing import Optional
from dataclasses import dataclass

@dataclass
class PriceQuery:
    subcommand: str  # "price"
    coin: str  # coingecko id, e.g. "bitcoin"
    currency: str  # vs currency, e.g. "usd"

@dataclass
class PriceQuote:
    coin: str
    currency: str
    price: float

@dataclass
class PriceLookupResult:
    success: bool
    quote: Optional[PriceQuote] = None
    reason: Optional[str] = None  # failure

    @classmethod
    def ok(cls, quote: PriceQuote) -> "PriceLookupResult":
        return cls(success=True, quote=quote)

    @classmethod
    def failed(cls, reason: str) -> "PriceLookupResult":
        return cls(success=False, reason=reason)
