from datetime import datetime

from pydantic import BaseModel, Field


class PriceResponse(BaseModel):
	symbol: str = Field(..., description='Exchange trading pair code')
	price: str = Field(..., description='Latest price, as returned by the exchange')
	source: str = Field(..., description='Exchange the price came from')
	fetched_at: datetime = Field(..., description='When the price was fetched (UTC)')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'symbol': 'BTCUSDT',
				'price': '65000.50',
				'source': 'binance',
				'fetched_at': '2025-09-27T10:30:00Z',
			}
		}


class RateResponse(BaseModel):
	base_currency: str = Field(..., description='Base currency code echoed by the rate API')
	quote_currency: str = Field(..., description='Quote currency code')
	rate: float = Field(..., description='Units of quote currency per unit of base currency')
	source: str = Field(..., description='Rate provider')
	fetched_at: datetime = Field(..., description='When the rate was fetched (UTC)')


class ConversionResponse(BaseModel):
	price: PriceResponse
	rate: RateResponse
	converted_amount: float = Field(..., description='Price expressed in the quote currency, unrounded')


class HealthResponse(BaseModel):
	status: str
	app: str
