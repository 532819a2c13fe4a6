from datetime import date
from typing import Protocol

from domain.models.currency import RateTable


class ApiKeySource(Protocol):
	async def load_api_key(self) -> str | None: ...


class ExchangeRateProvider(Protocol):
	"""Anchor-based rate source used by the rate repository."""

	@property
	def name(self) -> str: ...

	async def fetch_latest_rates(self) -> RateTable: ...

	async def fetch_historical_rates(
		self, base: str, quote: str, days: int = 5
	) -> dict[date, RateTable]: ...

	async def close(self) -> None: ...
