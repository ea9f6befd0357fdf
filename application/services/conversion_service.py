from domain.exceptions.currency import (
	CurrencyMismatchError,
	FormatError,
	InvalidArgumentError,
	ParseError,
)
from domain.models.currency import PriceRecord, RateRecord

QUOTE_CODE_LENGTH = 3


def derive_quote_currency(symbol: str) -> str:
	"""Treat the last three characters of a trading symbol as its quote currency.

	This is a plain suffix cut: "BTCUSDT" gives "SDT", not "USDT" or "USD".
	"""
	if len(symbol) <= QUOTE_CODE_LENGTH:
		raise FormatError(f'invalid crypto symbol format: {symbol!r}')
	return symbol[-QUOTE_CODE_LENGTH:]


def parse_price(text: str) -> float:
	# float() also accepts padding and digit separators; ticker prices never carry them
	if text != text.strip() or '_' in text:
		raise ParseError(f'failed to parse crypto price {text!r}')
	try:
		return float(text)
	except ValueError as e:
		raise ParseError(f'failed to parse crypto price {text!r}: {e}') from e


def convert_crypto_to_fiat(price: PriceRecord | None, rate: RateRecord | None) -> float:
	"""Express a crypto price in the quote currency of a fiat rate.

	The price's quote currency (derived from its symbol) must equal the
	rate's base currency. The result is not rounded.
	"""
	if price is None:
		raise InvalidArgumentError('crypto price data cannot be None')
	if rate is None:
		raise InvalidArgumentError('fiat rate data cannot be None')

	quote_currency = derive_quote_currency(price.symbol)
	if quote_currency != rate.base_currency:
		raise CurrencyMismatchError(
			f'mismatch between crypto quote currency ({quote_currency}) '
			f'and fiat rate base currency ({rate.base_currency})',
			quote_currency=quote_currency,
			base_currency=rate.base_currency,
		)

	return parse_price(price.price) * rate.rate
