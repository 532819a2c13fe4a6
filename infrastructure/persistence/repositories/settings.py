import json
import logging
from datetime import datetime

from sqlalchemy import delete

from domain.currencies import DEFAULT_FAVORITES
from domain.exceptions.currency import InvalidSettingError
from domain.models.currency import AppSettings, ThemeMode
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.settings import SettingDB

logger = logging.getLogger(__name__)

FAVORITES_COUNT = 3


class SettingsStore:
	"""Typed key-value access to the persisted user settings."""

	API_KEY = 'exchangerates_api_key'
	LAST_SYNC = 'last_sync_time'
	USE_MOCK_RATES = 'use_mock_rates'
	FAVORITE_CURRENCIES = 'favorite_currencies'
	HAS_PREMIUM_PLAN = 'has_premium_plan'
	THEME_MODE = 'theme_mode'

	def __init__(self, database: Database):
		self.db = database

	async def _get(self, key: str) -> str | None:
		async with self.db.session() as session:
			row = await session.get(SettingDB, key)
			return row.value if row is not None else None

	async def _set(self, key: str, value: str) -> None:
		async with self.db.session() as session:
			await session.merge(SettingDB(key=key, value=value))
		logger.debug(f'Setting {key} saved')

	async def _delete(self, key: str) -> None:
		async with self.db.session() as session:
			await session.execute(delete(SettingDB).where(SettingDB.key == key))

	async def _get_bool(self, key: str, default: bool) -> bool:
		value = await self._get(key)
		if value is None:
			return default
		return value == 'true'

	async def _set_bool(self, key: str, value: bool) -> None:
		await self._set(key, 'true' if value else 'false')

	# API key

	async def save_api_key(self, api_key: str) -> None:
		await self._set(self.API_KEY, api_key.strip())

	async def load_api_key(self) -> str | None:
		return await self._get(self.API_KEY)

	# Last sync time

	async def save_last_sync(self, time: datetime) -> None:
		await self._set(self.LAST_SYNC, time.isoformat())

	async def load_last_sync(self) -> datetime | None:
		value = await self._get(self.LAST_SYNC)
		if value is None:
			return None
		try:
			return datetime.fromisoformat(value)
		except ValueError:
			logger.warning(f'Ignoring unparsable last sync timestamp: {value!r}')
			return None

	# Mock mode, defaults to on so the app works without an API key

	async def save_use_mock_rates(self, value: bool) -> None:
		await self._set_bool(self.USE_MOCK_RATES, value)

	async def load_use_mock_rates(self) -> bool:
		return await self._get_bool(self.USE_MOCK_RATES, True)

	# Premium plan (Professional / Business), unlocks live history

	async def save_has_premium_plan(self, value: bool) -> None:
		await self._set_bool(self.HAS_PREMIUM_PLAN, value)

	async def load_has_premium_plan(self) -> bool:
		return await self._get_bool(self.HAS_PREMIUM_PLAN, False)

	# Favourites

	async def save_favorite_currencies(self, codes: list[str]) -> None:
		normalized = [code.strip().upper() for code in codes]
		if len(normalized) != FAVORITES_COUNT or not all(normalized):
			raise InvalidSettingError(
				f'Exactly {FAVORITES_COUNT} favourite currency codes are required'
			)
		await self._set(self.FAVORITE_CURRENCIES, json.dumps(normalized))

	async def load_favorite_currencies(self) -> list[str]:
		value = await self._get(self.FAVORITE_CURRENCIES)
		codes = None
		if value is not None:
			try:
				codes = json.loads(value)
			except json.JSONDecodeError:
				logger.warning('Ignoring unparsable favourite currencies')
		if not codes:
			return list(DEFAULT_FAVORITES)
		return list(codes)

	# Theme: only light and dark are stored, absence means "follow the system"

	async def save_theme_mode(self, mode: ThemeMode) -> None:
		if mode is ThemeMode.SYSTEM:
			await self._delete(self.THEME_MODE)
		else:
			await self._set(self.THEME_MODE, mode.value)

	async def load_theme_mode(self) -> ThemeMode:
		value = await self._get(self.THEME_MODE)
		if value == ThemeMode.DARK.value:
			return ThemeMode.DARK
		if value == ThemeMode.LIGHT.value:
			return ThemeMode.LIGHT
		return ThemeMode.SYSTEM

	async def load_all(self) -> AppSettings:
		return AppSettings(
			api_key=await self.load_api_key(),
			use_mock_rates=await self.load_use_mock_rates(),
			has_premium_plan=await self.load_has_premium_plan(),
			favorite_currencies=await self.load_favorite_currencies(),
			last_sync=await self.load_last_sync(),
			theme_mode=await self.load_theme_mode(),
		)
