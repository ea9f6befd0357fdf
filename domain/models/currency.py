from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExchangeEndpointConfig:
    base_url: str  # e.g. "https://api.binance.com"
    url_path: str  # e.g. "/api/v3/ticker/price"
    source: str
    query_param: str  # "symbol" (Binance), "instId" (OKX), "product_id" (Coinbase)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.url_path.lstrip('/')}"


@dataclass(frozen=True)
class PriceRecord:
    symbol: str
    price: str  # kept as text to avoid float precision loss
    source: str
    fetched_at: datetime


@dataclass(frozen=True)
class RateRecord:
    base_currency: str
    quote_currency: str
    rate: float
    source: str
    fetched_at: datetime


@dataclass(frozen=True)
class ConversionResult:
    price: PriceRecord
    rate: RateRecord
    converted_amount: float
