import logging
from datetime import UTC, datetime

import httpx
from pydantic import ValidationError

from config.settings import API_KEY_ENV_VAR, read_api_key
from domain.exceptions.currency import (
    APIError,
    ConfigError,
    CurrencyNotFoundError,
    DecodeError,
)
from domain.models.currency import RateRecord

from .base import FiatRateProvider, ensure_ok, get_response
from .schemas import RateTableResponse

logger = logging.getLogger(__name__)

# https://www.exchangerate-api.com/docs/overview
EXCHANGERATE_API_URL = "https://v6.exchangerate-api.com/v6/{api_key}/latest/{base_currency}"
EXCHANGERATE_API_SOURCE = "v6.exchangerate-api.com"


def fetch_fiat_rate(
    client: httpx.Client | None,
    base_currency: str,
    quote_currency: str,
    api_key: str | None = None,
) -> RateRecord:
    """Fetch the `base_currency`/`quote_currency` rate from exchangerate-api (v6).

    When `api_key` is not given it is read from the EXCHANGERATE_API_KEY
    environment variable. A missing key fails before any request is made.
    The returned record carries the base code echoed back by the API.
    """
    if client is None:
        raise ConfigError("http client cannot be None")

    if api_key is None:
        api_key = read_api_key()
    if not api_key:
        raise ConfigError(f"API key not set: environment variable {API_KEY_ENV_VAR} is not set")

    pair = f"{base_currency}/{quote_currency}"
    label = f"ExchangeRate API (v6) rate for {pair}"
    url = EXCHANGERATE_API_URL.format(api_key=api_key, base_currency=base_currency)
    log_url = EXCHANGERATE_API_URL.format(api_key="***", base_currency=base_currency)
    logger.debug(f"Fetching fiat rate from {log_url}")

    response = get_response(client, url, label=label, log_url=log_url)
    body = response.text
    logger.debug(f"Raw API response for {pair}: {body}")

    ensure_ok(response, label)

    try:
        table = RateTableResponse.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"{label}: failed to decode response: {body[:200]}", body=body) from e

    if not table.is_successful:
        raise APIError(
            f"{label}: API reported {table.result!r} ({table.error_type or 'no error type'}). Full response: {body}",
            result=table.result,
            error_type=table.error_type,
            body=body,
        )

    try:
        rate = table.conversion_rates[quote_currency]
    except KeyError as e:
        available = sorted(table.conversion_rates)
        logger.debug(f"Available rates for base {table.base_code}: {available}")
        raise CurrencyNotFoundError(
            f"Target currency {quote_currency} not found in ExchangeRate API (v6) response "
            f"for base {table.base_code} ({len(available)} currencies available)",
            currency=quote_currency,
            base_currency=table.base_code,
            available=available,
        ) from e

    return RateRecord(
        base_currency=table.base_code,
        quote_currency=quote_currency,
        rate=rate,
        source=EXCHANGERATE_API_SOURCE,
        fetched_at=datetime.now(UTC),
    )


class ExchangeRateAPIProvider(FiatRateProvider):
    def __init__(self, api_key: str | None = None):
        self.api_key = api_key

    @property
    def name(self) -> str:
        return "exchangerate-api"

    def fetch_rate(self, client: httpx.Client, base_currency: str, quote_currency: str) -> RateRecord:
        return fetch_fiat_rate(client, base_currency, quote_currency, api_key=self.api_key)

    def supported_currencies(self) -> list[str]:
        return [
            "USD", "EUR", "GBP", "JPY", "AUD", "CAD", "CHF", "CNY",
            "SEK", "NZD", "MXN", "SGD", "HKD", "NOK", "TRY", "RUB",
            "INR", "BRL", "ZAR", "KRW", "THB", "PLN", "CZK", "HUF",
        ]
