import logging
from datetime import datetime

from application.services.rate_repository import RateRepository
from domain.exceptions.currency import MockModeEnabledError, SyncInProgressError
from domain.models.currency import RateTable
from infrastructure.persistence.repositories.settings import SettingsStore

logger = logging.getLogger(__name__)


def format_sync_time(time: datetime) -> str:
	return time.strftime('%d.%m.%Y %H:%M')


class SyncService:
	"""User-triggered live sync with a busy flag; one sync at a time."""

	def __init__(self, repository: RateRepository, settings_store: SettingsStore):
		self.repository = repository
		self.settings_store = settings_store
		self.is_syncing = False

	async def synchronize(self) -> RateTable:
		if await self.settings_store.load_use_mock_rates():
			raise MockModeEnabledError()
		if self.is_syncing:
			raise SyncInProgressError()

		self.is_syncing = True
		try:
			return await self.repository.sync_live_rates()
		finally:
			self.is_syncing = False

	def status_text(self, use_mock: bool) -> str:
		if use_mock:
			return (
				'Mock mode is enabled. Go to Settings to disable it and fetch live exchange rates.'
			)

		last_sync = self.repository.last_sync
		if last_sync is None:
			return 'Last synchronization: never\nTap "synchronize now" to fetch the newest rates.'

		return (
			f'Last synchronization: {format_sync_time(last_sync)}\n'
			'Tap "synchronize now" to refresh the exchange rates.'
		)
