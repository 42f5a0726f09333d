from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.graph.cycle_guard import CycleGuard


class Settings(BaseSettings):
	CONVERSION_API_URL: str = 'https://api-coding-challenge.neofinancial.com'
	CONVERSION_API_SEED: str = '12454'
	HTTP_TIMEOUT: int = 10

	BASE_CURRENCY: str = 'CAD'
	BASE_AMOUNT: Decimal = Decimal(100)
	AMOUNT_DECIMAL_PLACES: int | None = None

	# Path search
	CYCLE_GUARD: CycleGuard = CycleGuard.VISITED
	MAX_PATH_DEPTH: int = 64

	REPORT_FILENAME: str = 'currency_conversion.csv'

	# Application
	APP_NAME: str = 'Currency Conversion Report'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
