import argparse
import logging
import sys
from dataclasses import asdict

import httpx
from pydantic import ValidationError

from application.services import QuoteService
from config.logger import setup_logging
from config.settings import API_KEY_ENV_VAR, LOG_LEVELS, Settings, get_settings
from domain.exceptions.currency import CurrencyException
from infrastructure.providers import BinanceProvider, ExchangeRateAPIProvider

logger = logging.getLogger(__name__)

EPILOG = f"""examples:
  btcq                        fetch both crypto and fiat data (default pair BTCUSDT)
  btcq --crypto               fetch cryptocurrency prices only
  btcq --fiat                 fetch fiat exchange rates only
  btcq --pair ETHUSDT         fetch ETHUSDT price from Binance
  btcq --crypto --pair ADAUSDT
  btcq --convert --pair BTCUSD --base USD --quote CNY

environment:
  {API_KEY_ENV_VAR}        required for fiat currency exchange rates
"""


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="btcq",
        description="cryptoPulse - fetch cryptocurrency prices and fiat exchange rates",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--crypto", action="store_true", help="fetch cryptocurrency prices only")
    parser.add_argument("--fiat", action="store_true", help="fetch fiat currency exchange rates only")
    parser.add_argument(
        "--pair",
        default=settings.DEFAULT_PAIR,
        help="trading pair to fetch (format depends on exchange, e.g. BTCUSDT for Binance)",
    )
    parser.add_argument("--base", default=settings.DEFAULT_FIAT_BASE, help="fiat base currency")
    parser.add_argument("--quote", default=settings.DEFAULT_FIAT_QUOTE, help="fiat quote currency")
    parser.add_argument(
        "--convert",
        action="store_true",
        help="fetch both and print the pair price converted into the quote currency",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.LOG_LEVEL,
        help="logging level",
    )
    return parser


def run(args: argparse.Namespace, client: httpx.Client) -> None:
    service = QuoteService(
        client=client,
        price_provider=BinanceProvider(),
        rate_provider=ExchangeRateAPIProvider(),
    )

    if args.convert:
        result = service.convert(args.pair, args.base, args.quote)
        print(f"Fetched price: {asdict(result.price)}")
        print(f"Fetched rate: {asdict(result.rate)}")
        print(f"{args.pair} = {result.converted_amount:.2f} {args.quote}")
        return

    # neither flag means both
    fetch_crypto = args.crypto or not args.fiat
    fetch_fiat = args.fiat or not args.crypto

    if fetch_crypto:
        price = service.get_price(args.pair)
        print(f"Fetched price: {asdict(price)}")

    if fetch_fiat:
        rate = service.get_rate(args.base, args.quote)
        print(f"Fetched rate: {asdict(rate)}")


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    setup_logging(args.log_level, settings.LOG_FORMAT)

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=settings.HTTP_TIMEOUT)

    try:
        run(args, client)
    except CurrencyException as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if owns_client:
            client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
