import logging
from typing import Annotated

from fastapi import Depends

from application.services import (
	ConversionService,
	CurrencyService,
	HistoryService,
	RateRepository,
	SyncService,
)
from config.settings import Settings, get_settings
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.settings import SettingsStore
from infrastructure.providers import ExchangeRatesAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	settings_store: SettingsStore | None = None
	provider: ExchangeRatesAPIProvider | None = None
	rate_repository: RateRepository | None = None
	sync_service: SyncService | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.db = Database(settings.DATABASE_URL)
	deps.settings_store = SettingsStore(deps.db)
	deps.provider = ExchangeRatesAPIProvider(
		key_source=deps.settings_store,
		base_url=settings.EXCHANGERATES_BASE_URL,
		timeout=settings.REQUEST_TIMEOUT,
	)
	deps.rate_repository = RateRepository(deps.provider, deps.settings_store)
	deps.sync_service = SyncService(deps.rate_repository, deps.settings_store)
	logger.info('Dependencies initialized')


async def bootstrap(settings: Settings | None = None) -> None:
	"""Create tables, seed the API key from the environment, restore last sync."""
	logger.info('Bootstrapping application...')
	settings = settings or get_settings()

	if deps.db is None or deps.settings_store is None or deps.rate_repository is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	await deps.db.create_tables()

	if settings.EXCHANGERATES_API_KEY and not await deps.settings_store.load_api_key():
		await deps.settings_store.save_api_key(settings.EXCHANGERATES_API_KEY)
		logger.info('API key seeded from environment')

	last_sync = await deps.rate_repository.load_last_sync()
	logger.info(f'Bootstrap complete (last sync: {last_sync or "never"})')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	if deps.db:
		await deps.db.close()

	logger.info('Cleanup complete')


def get_settings_store() -> SettingsStore:
	if deps.settings_store is None:
		raise RuntimeError('Settings store not initialized')
	return deps.settings_store


def get_rate_repository() -> RateRepository:
	if deps.rate_repository is None:
		raise RuntimeError('Rate repository not initialized')
	return deps.rate_repository


def get_sync_service() -> SyncService:
	if deps.sync_service is None:
		raise RuntimeError('Sync service not initialized')
	return deps.sync_service


def get_conversion_service(
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
) -> ConversionService:
	return ConversionService(repository)


def get_currency_service(
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
) -> CurrencyService:
	return CurrencyService(repository)


def get_history_service(
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
	settings_store: Annotated[SettingsStore, Depends(get_settings_store)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> HistoryService:
	return HistoryService(repository, settings_store, default_days=settings.HISTORY_DAYS)
