import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	ConfigError,
	ConversionError,
	CurrencyNotFoundError,
	InvalidArgumentError,
	ProviderError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidArgumentError)
	@app.exception_handler(ConversionError)
	async def conversion_error_handler(request: Request, exc: Exception):
		return JSONResponse(status_code=422, content={'detail': str(exc)})

	@app.exception_handler(CurrencyNotFoundError)
	async def currency_not_found_handler(request: Request, exc: CurrencyNotFoundError):
		return JSONResponse(
			status_code=404,
			content={'detail': str(exc), 'available_currencies': exc.available},
		)

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(status_code=502, content={'detail': 'Upstream price service error'})

	@app.exception_handler(ConfigError)
	async def config_error_handler(request: Request, exc: ConfigError):
		logger.error(f'Configuration error: {exc}')
		return JSONResponse(status_code=503, content={'detail': 'Service not configured'})
