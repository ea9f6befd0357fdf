import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_quote_service
from api.main import app
from application.services import QuoteService
from infrastructure.providers import BinanceProvider, ExchangeRateAPIProvider

RATE_TABLE = {
    "result": "success",
    "base_code": "USD",
    "conversion_rates": {"USD": 1, "CNY": 7.2, "EUR": 0.9},
}


class Upstream:
    """Fake Binance and exchangerate-api hosts behind one MockTransport."""

    def __init__(self):
        self.ticker = {"symbol": "BTCUSD", "price": "60000.00"}
        self.ticker_status = 200
        self.rates = RATE_TABLE
        self.fail_with: Exception | None = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        if self.fail_with is not None:
            raise self.fail_with
        if request.url.host == "api.binance.com":
            return httpx.Response(self.ticker_status, json=self.ticker)
        return httpx.Response(200, json=self.rates)


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
def client(upstream):
    http_client = httpx.Client(transport=httpx.MockTransport(upstream.handle))
    service = QuoteService(
        client=http_client,
        price_provider=BinanceProvider(),
        rate_provider=ExchangeRateAPIProvider(api_key="test_key"),
    )
    app.dependency_overrides[get_quote_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
    http_client.close()


def test_get_price_success(client):
    response = client.get("/api/price/btcusd")

    assert response.status_code == 200
    data = response.json()
    assert data["symbol"] == "BTCUSD"
    assert data["price"] == "60000.00"
    assert data["source"] == "binance"
    assert "fetched_at" in data


def test_get_rate_success(client):
    response = client.get("/api/rate/usd/cny")

    assert response.status_code == 200
    data = response.json()
    assert data["base_currency"] == "USD"
    assert data["quote_currency"] == "CNY"
    assert data["rate"] == 7.2


def test_convert_success(client):
    response = client.get("/api/convert/BTCUSD/USD/CNY")

    assert response.status_code == 200
    data = response.json()
    assert data["converted_amount"] == pytest.approx(432000.0)
    assert data["price"]["symbol"] == "BTCUSD"
    assert data["rate"]["rate"] == 7.2


def test_convert_usdt_pair_is_rejected(client, upstream):
    upstream.ticker = {"symbol": "BTCUSDT", "price": "60000.00"}

    response = client.get("/api/convert/BTCUSDT/USD/CNY")

    assert response.status_code == 422
    assert "SDT" in response.json()["detail"]


def test_unknown_quote_currency_is_404(client):
    response = client.get("/api/rate/USD/NGN")

    assert response.status_code == 404
    data = response.json()
    assert "NGN" in data["detail"]
    assert data["available_currencies"] == ["CNY", "EUR", "USD"]


def test_upstream_status_error_is_502(client, upstream):
    upstream.ticker_status = 500

    response = client.get("/api/price/BTCUSD")

    assert response.status_code == 502
    assert response.json() == {"detail": "Upstream price service error"}


def test_upstream_network_error_is_502(client, upstream):
    upstream.fail_with = httpx.ConnectError("Connection refused")

    response = client.get("/api/rate/USD/CNY")

    assert response.status_code == 502


def test_rate_api_business_error_is_502(client, upstream):
    upstream.rates = {"result": "error", "error-type": "unsupported-code"}

    response = client.get("/api/rate/XXX/CNY")

    assert response.status_code == 502


def test_missing_api_key_is_503(upstream, no_api_key_env):
    http_client = httpx.Client(transport=httpx.MockTransport(upstream.handle))
    service = QuoteService(
        client=http_client,
        price_provider=BinanceProvider(),
        rate_provider=ExchangeRateAPIProvider(),
    )
    app.dependency_overrides[get_quote_service] = lambda: service
    try:
        response = TestClient(app).get("/api/rate/USD/CNY")
    finally:
        app.dependency_overrides.clear()
        http_client.close()

    assert response.status_code == 503
    assert response.json() == {"detail": "Service not configured"}


def test_currency_code_length_is_validated(client):
    response = client.get("/api/rate/US/CNY")

    assert response.status_code == 422
