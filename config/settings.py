from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	DATABASE_URL: str = 'sqlite+aiosqlite:///./currentcy.db'

	EXCHANGERATES_BASE_URL: str = 'https://api.exchangeratesapi.io/v1'
	# Seeds the settings store on startup when no key has been saved yet
	EXCHANGERATES_API_KEY: str = ''
	REQUEST_TIMEOUT: float = 5.0

	HISTORY_DAYS: int = 5

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'
	LOG_TO_FILE: bool = True

	# Application
	APP_NAME: str = 'Currentcy API'
	DEBUG: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
