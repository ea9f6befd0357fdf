import logging
from concurrent.futures import ThreadPoolExecutor

import httpx

from application.services.conversion_service import convert_crypto_to_fiat
from domain.models.currency import ConversionResult, PriceRecord, RateRecord
from infrastructure.providers import CryptoPriceProvider, FiatRateProvider

logger = logging.getLogger(__name__)


class QuoteService:
    def __init__(
        self,
        client: httpx.Client,
        price_provider: CryptoPriceProvider,
        rate_provider: FiatRateProvider,
    ):
        self.client = client
        self.price_provider = price_provider
        self.rate_provider = rate_provider

    def get_price(self, symbol: str) -> PriceRecord:
        price = self.price_provider.fetch_price(self.client, symbol)
        logger.info(f"Fetched {price.symbol} = {price.price} from {price.source}")
        return price

    def get_rate(self, base_currency: str, quote_currency: str) -> RateRecord:
        rate = self.rate_provider.fetch_rate(self.client, base_currency, quote_currency)
        logger.info(f"Fetched {rate.base_currency}/{rate.quote_currency} = {rate.rate} from {rate.source}")
        return rate

    def convert(self, symbol: str, base_currency: str, quote_currency: str) -> ConversionResult:
        """Fetch price and rate side by side, then convert."""
        with ThreadPoolExecutor(max_workers=2) as executor:
            price_future = executor.submit(self.get_price, symbol)
            rate_future = executor.submit(self.get_rate, base_currency, quote_currency)
            price = price_future.result()
            rate = rate_future.result()

        converted = convert_crypto_to_fiat(price, rate)
        logger.info(f"Converted {symbol} into {quote_currency}: {converted}")
        return ConversionResult(price=price, rate=rate, converted_amount=converted)
