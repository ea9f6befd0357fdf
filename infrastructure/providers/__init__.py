from .base import CryptoPriceProvider, FiatRateProvider
from .binance import DEFAULT_BINANCE_CONFIG, BinanceProvider, fetch_crypto_price
from .exchangerate_api import ExchangeRateAPIProvider, fetch_fiat_rate

__all__ = [
    'CryptoPriceProvider',
    'FiatRateProvider',
    'BinanceProvider',
    'ExchangeRateAPIProvider',
    'DEFAULT_BINANCE_CONFIG',
    'fetch_crypto_price',
    'fetch_fiat_rate',
]
