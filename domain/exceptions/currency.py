class CurrencyException(Exception):
    pass


class ConfigError(CurrencyException):
    pass


class InvalidArgumentError(CurrencyException):
    pass


class ProviderError(CurrencyException):
    """Upstream API call failed or returned something unusable."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class NetworkError(ProviderError):
    pass


class ResponseReadError(ProviderError):
    pass


class HTTPStatusError(ProviderError):
    def __init__(self, message: str, status_code: int, body: str | None = None):
        super().__init__(message, body=body)
        self.status_code = status_code


class DecodeError(ProviderError):
    pass


class APIError(ProviderError):
    """The API answered 200 but flagged a failure in the payload."""

    def __init__(self, message: str, result: str, error_type: str | None = None, body: str | None = None):
        super().__init__(message, body=body)
        self.result = result
        self.error_type = error_type


class CurrencyNotFoundError(ProviderError):
    def __init__(self, message: str, currency: str, base_currency: str, available: list[str]):
        super().__init__(message)
        self.currency = currency
        self.base_currency = base_currency
        self.available = available


class ConversionError(CurrencyException):
    pass


class FormatError(ConversionError):
    pass


class CurrencyMismatchError(ConversionError):
    def __init__(self, message: str, quote_currency: str, base_currency: str):
        super().__init__(message)
        self.quote_currency = quote_currency
        self.base_currency = base_currency


class ParseError(ConversionError):
    pass
