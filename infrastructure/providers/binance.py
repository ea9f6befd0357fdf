import logging
import re
from datetime import UTC, datetime

import httpx
from pydantic import ValidationError

from domain.exceptions.currency import DecodeError
from domain.models.currency import ExchangeEndpointConfig, PriceRecord

from .base import CryptoPriceProvider, ensure_ok, get_response
from .schemas import TickerResponse

logger = logging.getLogger(__name__)

# https://developers.binance.com/docs/binance-spot-api-docs/rest-api/general-api-information
DEFAULT_BINANCE_CONFIG = ExchangeEndpointConfig(
	base_url='https://api.binance.com',
	url_path='/api/v3/ticker/price',
	source='binance',
	query_param='symbol',
)

SYMBOL_PATTERN = re.compile(r'[A-Z]{6,12}')
QUOTE_ASSETS = ('USDT', 'BTC', 'ETH', 'BNB')


def fetch_crypto_price(
	client: httpx.Client | None, symbol: str, config: ExchangeEndpointConfig | None = None
) -> PriceRecord:
	"""Fetch the latest price for `symbol` from an exchange ticker endpoint.

	`config` describes the endpoint; None selects the Binance spot ticker.
	The exchange must answer with {"symbol": str, "price": str}.
	"""
	config = config or DEFAULT_BINANCE_CONFIG
	label = f'{config.source} price for {symbol}'

	response = get_response(client, config.url, {config.query_param: symbol}, label=label)
	ensure_ok(response, label)

	try:
		ticker = TickerResponse.model_validate_json(response.content)
	except ValidationError as e:
		raise DecodeError(
			f'{label}: unexpected response: {e.error_count()} validation error(s): {response.text[:200]}',
			body=response.text,
		) from e

	return PriceRecord(
		symbol=ticker.symbol,
		price=ticker.price,
		source=config.source,
		fetched_at=datetime.now(UTC),
	)


class BinanceProvider(CryptoPriceProvider):
	def __init__(self, default_config: ExchangeEndpointConfig | None = None):
		self.default_config = default_config or DEFAULT_BINANCE_CONFIG

	@property
	def name(self) -> str:
		return 'binance'

	def fetch_price(
		self, client: httpx.Client, symbol: str, config: ExchangeEndpointConfig | None = None
	) -> PriceRecord:
		return fetch_crypto_price(client, symbol, config or self.default_config)

	def validate_symbol(self, symbol: str) -> bool:
		"""Binance pairs are 6-12 uppercase letters with no separator, e.g. BTCUSDT."""
		if not SYMBOL_PATTERN.fullmatch(symbol):
			return False
		return symbol.endswith(QUOTE_ASSETS)

	def supported_symbols(self) -> list[str]:
		return [
			'BTCUSDT', 'ETHUSDT', 'BNBUSDT', 'ADAUSDT', 'DOTUSDT',
			'LINKUSDT', 'LTCUSDT', 'BCHUSDT', 'XLMUSDT', 'EOSUSDT',
			'TRXUSDT', 'XRPUSDT', 'ATOMUSDT', 'VETUSDT', 'NEOUSDT',
			# BTC-quoted
			'ETHBTC', 'BNBBTC', 'ADABTC', 'DOTBTC', 'LINKBTC',
		]
