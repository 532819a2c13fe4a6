import logging
import time
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from domain import currencies
from domain.exceptions.currency import InvalidDaysError
from domain.models.currency import HistoryPoint, RateTable
from infrastructure.monitoring.logger import elapsed_ms, get_event_logger
from infrastructure.persistence.repositories.settings import SettingsStore
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

MOCK_RATE_START = 1.0
MOCK_RATE_STEP = 0.01
# Relative change between two consecutive synthetic history days
MOCK_HISTORY_STEP = 0.0015


def build_mock_rates(codes: Iterable[str]) -> RateTable:
	"""Deterministic synthetic table: sorted codes valued 1.00, 1.01, 1.02, ..."""
	return {
		code: round(MOCK_RATE_START + MOCK_RATE_STEP * i, 2)
		for i, code in enumerate(sorted(set(codes)))
	}


class RateRepository:
	"""In-memory source of truth for mock and live rates.

	This is the only writer of the rate tables and the known currency set.
	Readers always receive copies.
	"""

	def __init__(
		self,
		provider: ExchangeRateProvider,
		settings_store: SettingsStore,
		clock: Callable[[], datetime] = datetime.now,
	):
		self.provider = provider
		self.settings_store = settings_store
		self._clock = clock
		self.events = get_event_logger()

		self._codes: set[str] = set(currencies.BASE_CODES)
		self._mock_rates: RateTable = build_mock_rates(self._codes)
		self._live_rates: RateTable | None = None
		self._last_sync: datetime | None = None

	@property
	def mock_rates(self) -> RateTable:
		return dict(self._mock_rates)

	@property
	def last_sync(self) -> datetime | None:
		return self._last_sync

	@property
	def has_live_rates(self) -> bool:
		return self._live_rates is not None

	@property
	def currency_set(self) -> frozenset[str]:
		return frozenset(self._codes)

	async def load_last_sync(self) -> datetime | None:
		self._last_sync = await self.settings_store.load_last_sync()
		return self._last_sync

	def get_rates(self, use_mock: bool) -> RateTable:
		if use_mock or self._live_rates is None:
			return dict(self._mock_rates)
		return dict(self._live_rates)

	def get_currency_codes(self, use_mock: bool) -> list[str]:
		return sorted(self.get_rates(use_mock))

	async def sync_live_rates(self) -> RateTable:
		logger.info(f'Synchronizing live rates from {self.provider.name}...')
		start_time = time.perf_counter()
		fetched = await self.provider.fetch_latest_rates()

		synced_at = self._clock()
		await self.settings_store.save_last_sync(synced_at)

		self._codes.update(fetched)
		self._mock_rates = build_mock_rates(self._codes)
		self._live_rates = dict(fetched)
		self._last_sync = synced_at

		self.events.log_rate_sync(
			self.provider.name, len(fetched), len(self._codes), elapsed_ms(start_time)
		)
		return dict(fetched)

	async def fetch_historical_rates(
		self, base: str, quote: str, days: int = 5, use_mock: bool | None = None
	) -> list[HistoryPoint]:
		"""Cross-rate series base -> quote, oldest first.

		Mock mode never touches the network. Live days lacking either symbol
		are left out, so fewer than `days` points may come back.
		"""
		if days < 1:
			raise InvalidDaysError(days)

		if use_mock is None:
			use_mock = await self.settings_store.load_use_mock_rates()

		logger.info(f'Loading {days}-day history {base}->{quote} ({"mock" if use_mock else "live"})')
		if use_mock:
			return self._mock_history(base, quote, days)

		raw = await self.provider.fetch_historical_rates(base, quote, days)

		points = []
		for day in sorted(raw):
			day_rates = raw[day]
			base_rate = day_rates.get(base)
			quote_rate = day_rates.get(quote)
			if base_rate is None or quote_rate is None:
				logger.debug(f'No {base}/{quote} rates for {day}, skipping')
				continue
			points.append(HistoryPoint(date=day, rate=quote_rate / base_rate))

		return points

	def _mock_history(self, base: str, quote: str, days: int) -> list[HistoryPoint]:
		cross = self._mock_rates.get(quote, 1.0) / self._mock_rates.get(base, 1.0)
		today = self._clock().date()
		center = (days - 1) / 2

		return [
			HistoryPoint(
				date=today - timedelta(days=days - 1 - k),
				rate=cross * (1.0 + (k - center) * MOCK_HISTORY_STEP),
			)
			for k in range(days)
		]

	@staticmethod
	def flag_for(code: str) -> str:
		return currencies.flag_for(code)

	@staticmethod
	def name_for(code: str) -> str:
		return currencies.name_for(code)
