import logging
from abc import ABC, abstractmethod
from datetime import datetime

import httpx

from domain.exceptions.currency import (
    ConfigError,
    HTTPStatusError,
    NetworkError,
    ResponseReadError,
)
from domain.models.currency import ExchangeEndpointConfig, PriceRecord, RateRecord

logger = logging.getLogger(__name__)


class CryptoPriceProvider(ABC):
    """Exchange that can quote the latest price of a trading pair."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def fetch_price(
        self, client: httpx.Client, symbol: str, config: ExchangeEndpointConfig | None = None
    ) -> PriceRecord:
        """Fetch the latest price; `config` of None means the provider default."""

    @abstractmethod
    def supported_symbols(self) -> list[str]:
        ...

    @abstractmethod
    def validate_symbol(self, symbol: str) -> bool:
        """Check that the symbol is written the way this exchange expects."""


class FiatRateProvider(ABC):
    """Service that can quote the rate between two fiat currencies."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def fetch_rate(self, client: httpx.Client, base_currency: str, quote_currency: str) -> RateRecord:
        ...

    @abstractmethod
    def supported_currencies(self) -> list[str]:
        ...


def get_response(
    client: httpx.Client | None,
    url: str,
    params: dict | None = None,
    *,
    label: str,
    log_url: str | None = None,
) -> httpx.Response:
    """Common GET handling: one attempt, body fully read before returning.

    Transport failures become NetworkError, failures while reading the body
    become ResponseReadError. The status code is not checked here.
    """
    if client is None:
        raise ConfigError('http client cannot be None')

    log_url = log_url or url
    start_time = datetime.now()
    try:
        with client.stream('GET', url, params=params) as response:
            try:
                response.read()
            except httpx.HTTPError as e:
                raise ResponseReadError(
                    f'{label}: failed to read response body: {e.__class__.__name__}: {e}'
                ) from e
    except httpx.RequestError as e:
        logger.error(f'{label}: request to {log_url} failed: {e.__class__.__name__}')
        raise NetworkError(f'{label}: request failed: {e.__class__.__name__}: {e}') from e

    response_time_ms = int((datetime.now() - start_time).total_seconds() * 1000)
    logger.debug(f'GET {log_url} -> HTTP {response.status_code} ({response_time_ms} ms)')
    return response


def ensure_ok(response: httpx.Response, label: str) -> None:
    if response.status_code != httpx.codes.OK:
        raise HTTPStatusError(
            f'{label}: HTTP error {response.status_code}: {response.text[:200]}',
            status_code=response.status_code,
            body=response.text,
        )
