from .responses import ConversionResponse, HealthResponse, PriceResponse, RateResponse

__all__ = [
	'ConversionResponse',
	'HealthResponse',
	'PriceResponse',
	'RateResponse',
]
