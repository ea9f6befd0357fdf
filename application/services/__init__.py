from .conversion_service import convert_crypto_to_fiat, derive_quote_currency
from .quote_service import QuoteService

__all__ = ['QuoteService', 'convert_crypto_to_fiat', 'derive_quote_currency']
