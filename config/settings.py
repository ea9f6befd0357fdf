from functools import lru_cache
from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV_VAR = 'EXCHANGERATE_API_KEY'

LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
LogFormat = Literal['text', 'json']
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
	EXCHANGERATE_API_KEY: str = ''

	# HTTP client
	HTTP_TIMEOUT: float = 10.0

	# CLI defaults
	DEFAULT_PAIR: str = 'BTCUSDT'
	DEFAULT_FIAT_BASE: str = 'USD'
	DEFAULT_FIAT_QUOTE: str = 'CNY'

	# Application
	APP_NAME: str = 'cryptoPulse'
	LOG_LEVEL: LogLevel = 'INFO'
	LOG_FORMAT: LogFormat = 'text'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('LOG_LEVEL', mode='before')
	@classmethod
	def uppercase_level(cls, v):
		return v.upper() if isinstance(v, str) else v

	@field_validator('LOG_FORMAT', mode='before')
	@classmethod
	def lowercase_format(cls, v):
		return v.lower() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
	return Settings()


def read_api_key() -> str:
	"""Look up the rate API key at call time, bypassing the settings cache."""
	return Settings().EXCHANGERATE_API_KEY
