import logging
import math
import time
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from typing import Any

import httpx

from domain.currencies import ANCHOR_CURRENCY
from domain.exceptions.currency import (
	ApiKeyMissingError,
	InvalidDaysError,
	ProviderAPIError,
	ProviderError,
	ProviderHTTPError,
	ProviderRequestError,
)
from domain.models.currency import RateTable
from infrastructure.monitoring.logger import elapsed_ms, get_event_logger
from infrastructure.providers.base import ApiKeySource

logger = logging.getLogger(__name__)


class ExchangeRatesAPIProvider:
	"""HTTP client for exchangeratesapi.io.

	Pure I/O: nothing is cached here. The free plan only serves EUR-anchored
	rates, so the anchor is never requested explicitly.
	"""

	BASE_URL = 'https://api.exchangeratesapi.io/v1'

	def __init__(
		self,
		key_source: ApiKeySource,
		client: httpx.AsyncClient | None = None,
		base_url: str | None = None,
		timeout: float = 5.0,
		clock: Callable[[], datetime] = lambda: datetime.now(UTC),
	):
		self.key_source = key_source
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)
		self._clock = clock
		self.events = get_event_logger()

	@property
	def name(self) -> str:
		return 'exchangeratesapi'

	async def _api_key(self) -> str:
		api_key = await self.key_source.load_api_key()
		if not api_key:
			raise ApiKeyMissingError()
		return api_key

	async def _fetch_rates(
		self, endpoint: str, params: dict[str, Any], http_context: str, api_context: str
	) -> RateTable:
		url = f'{self.base_url}/{endpoint}'
		logger.debug(f'GET {url} symbols={params.get("symbols", "*")}')

		start_time = time.perf_counter()
		try:
			rates = await self._request(url, params, http_context, api_context)
		except ProviderError as e:
			self.events.log_provider_call(
				self.name,
				endpoint,
				False,
				elapsed_ms(start_time),
				error_message=f'HTTP {e.status_code}' if isinstance(e, ProviderHTTPError) else str(e),
			)
			raise

		self.events.log_provider_call(self.name, endpoint, True, elapsed_ms(start_time))
		return rates

	async def _request(
		self, url: str, params: dict[str, Any], http_context: str, api_context: str
	) -> RateTable:
		try:
			response = await self._client.get(url, params=params)
		except httpx.RequestError as e:
			raise ProviderRequestError(
				f'{http_context}: request failed ({e.__class__.__name__})'
			) from e

		if response.status_code != 200:
			raise ProviderHTTPError(response.status_code, response.text, http_context)

		try:
			data = response.json()
		except ValueError as e:
			raise ProviderError(f'{http_context}: response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError(f'{http_context}: response parsing error: unexpected payload')

		if not data.get('success', False):
			raise ProviderAPIError(data.get('error'), api_context)

		return self._parse_rates(data, http_context)

	@staticmethod
	def _parse_rates(data: dict, context: str) -> RateTable:
		try:
			rates = {code: float(value) for code, value in data['rates'].items()}
		except (KeyError, AttributeError, TypeError, ValueError) as e:
			raise ProviderError(f'{context}: response parsing error: {str(e)}') from e

		invalid = sorted(code for code, rate in rates.items() if not math.isfinite(rate) or rate <= 0)
		if invalid:
			raise ProviderError(
				f'{context}: response parsing error: invalid rates for {", ".join(invalid)}'
			)
		return rates

	async def fetch_latest_rates(self) -> RateTable:
		api_key = await self._api_key()
		rates = await self._fetch_rates(
			'latest',
			{'access_key': api_key},
			http_context='Failed to fetch rates',
			api_context='API error',
		)

		if ANCHOR_CURRENCY not in rates:
			rates = {ANCHOR_CURRENCY: 1.0, **rates}
		return rates

	async def fetch_historical_rates(
		self, base: str, quote: str, days: int = 5
	) -> dict[date, RateTable]:
		"""Fetch one two-symbol snapshot per day, today (UTC) going backward.

		Requests run one after another; the first failing day aborts the
		whole fetch.
		"""
		if days < 1:
			raise InvalidDaysError(days)
		api_key = await self._api_key()

		today = self._clock().date()
		result: dict[date, RateTable] = {}

		for i in range(days):
			day = today - timedelta(days=i)
			date_str = day.isoformat()

			result[day] = await self._fetch_rates(
				date_str,
				{'access_key': api_key, 'symbols': f'{base},{quote}'},
				http_context=f'Failed to fetch historical rates for {date_str}',
				api_context=f'API error on {date_str}',
			)

		return result

	async def close(self) -> None:
		await self._client.aclose()
