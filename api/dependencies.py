import logging

import httpx

from application.services import QuoteService
from config.settings import get_settings
from infrastructure.providers import (
	BinanceProvider,
	CryptoPriceProvider,
	ExchangeRateAPIProvider,
	FiatRateProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	http_client: httpx.Client | None = None
	price_provider: CryptoPriceProvider | None = None
	rate_provider: FiatRateProvider | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.http_client = httpx.Client(timeout=settings.HTTP_TIMEOUT)
	deps.price_provider = BinanceProvider()
	deps.rate_provider = ExchangeRateAPIProvider()
	logger.info('Dependencies initialized')


def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.http_client:
		deps.http_client.close()
		deps.http_client = None

	logger.info('Cleanup complete')


def get_quote_service() -> QuoteService:
	if deps.http_client is None or deps.price_provider is None or deps.rate_provider is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')
	return QuoteService(
		client=deps.http_client,
		price_provider=deps.price_provider,
		rate_provider=deps.rate_provider,
	)
