from pydantic import BaseModel, ConfigDict, Field, model_validator

SUCCESS_RESULT = 'success'


class TickerResponse(BaseModel):
	"""Latest-price ticker payload, e.g. {"symbol": "BTCUSDT", "price": "65000.50"}."""

	model_config = ConfigDict(extra='ignore', strict=True)

	symbol: str
	price: str


class RateTableResponse(BaseModel):
	"""Rate table payload returned by the v6 exchangerate-api `latest` endpoint.

	Error payloads carry only `result` and `error-type`, so everything except
	`result` is optional here.
	"""

	model_config = ConfigDict(extra='ignore', populate_by_name=True)

	result: str
	base_code: str = ''
	conversion_rates: dict[str, float] = Field(default_factory=dict)
	documentation: str | None = None
	terms_of_use: str | None = None
	time_last_update_unix: int | None = None
	error_type: str | None = Field(default=None, alias='error-type')

	@model_validator(mode='after')
	def require_base_code_on_success(self):
		if self.is_successful and not self.base_code:
			raise ValueError('successful rate table without base_code')
		return self

	@property
	def is_successful(self) -> bool:
		return self.result == SUCCESS_RESULT
