# nosec B101


import pytest
import pytest_asyncio
from datetime import datetime

from domain.exceptions.currency import InvalidSettingError
from domain.models.currency import AppSettings, ThemeMode
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.settings import SettingsStore


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f'sqlite+aiosqlite:///{tmp_path / "settings.db"}')
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def store(database):
    return SettingsStore(database)


# ============================================================================
# TEST: defaults on an empty store
# ============================================================================

@pytest.mark.asyncio
async def test_empty_store_returns_defaults(store):
    assert await store.load_api_key() is None
    assert await store.load_use_mock_rates() is True
    assert await store.load_has_premium_plan() is False
    assert await store.load_favorite_currencies() == ['CHF', 'EUR', 'USD']
    assert await store.load_last_sync() is None
    assert await store.load_theme_mode() is ThemeMode.SYSTEM


@pytest.mark.asyncio
async def test_load_all_returns_snapshot(store):
    await store.save_api_key('abc')
    await store.save_use_mock_rates(False)

    settings = await store.load_all()

    assert isinstance(settings, AppSettings)
    assert settings.api_key == 'abc'
    assert settings.use_mock_rates is False
    assert settings.has_premium_plan is False
    assert settings.favorite_currencies == ['CHF', 'EUR', 'USD']
    assert settings.theme_mode is ThemeMode.SYSTEM


# ============================================================================
# TEST: API key
# ============================================================================

@pytest.mark.asyncio
async def test_save_api_key_strips_whitespace(store):
    await store.save_api_key('  my_key \n')

    assert await store.load_api_key() == 'my_key'


@pytest.mark.asyncio
async def test_save_api_key_overwrites_previous_value(store):
    await store.save_api_key('first')
    await store.save_api_key('second')

    assert await store.load_api_key() == 'second'


# ============================================================================
# TEST: flags
# ============================================================================

@pytest.mark.asyncio
async def test_use_mock_rates_round_trip(store):
    await store.save_use_mock_rates(False)
    assert await store.load_use_mock_rates() is False

    await store.save_use_mock_rates(True)
    assert await store.load_use_mock_rates() is True


@pytest.mark.asyncio
async def test_has_premium_plan_round_trip(store):
    await store.save_has_premium_plan(True)

    assert await store.load_has_premium_plan() is True


@pytest.mark.asyncio
async def test_settings_persist_across_store_instances(database):
    await SettingsStore(database).save_has_premium_plan(True)

    assert await SettingsStore(database).load_has_premium_plan() is True


# ============================================================================
# TEST: favourites
# ============================================================================

@pytest.mark.asyncio
async def test_save_favorite_currencies_keeps_order_and_uppercases(store):
    await store.save_favorite_currencies(['usd', 'GBP', ' jpy '])

    assert await store.load_favorite_currencies() == ['USD', 'GBP', 'JPY']


@pytest.mark.asyncio
@pytest.mark.parametrize('codes', [[], ['USD'], ['USD', 'EUR'], ['USD', 'EUR', 'GBP', 'JPY'], ['USD', '', 'EUR']])
async def test_save_favorite_currencies_requires_exactly_three(store, codes):
    with pytest.raises(InvalidSettingError):
        await store.save_favorite_currencies(codes)

    assert await store.load_favorite_currencies() == ['CHF', 'EUR', 'USD']


@pytest.mark.asyncio
async def test_unparsable_favorites_fall_back_to_default(store):
    await store._set(SettingsStore.FAVORITE_CURRENCIES, 'not json')

    assert await store.load_favorite_currencies() == ['CHF', 'EUR', 'USD']


# ============================================================================
# TEST: last sync
# ============================================================================

@pytest.mark.asyncio
async def test_last_sync_round_trip(store):
    synced_at = datetime(2025, 11, 5, 14, 30, 12)

    await store.save_last_sync(synced_at)

    assert await store.load_last_sync() == synced_at


@pytest.mark.asyncio
async def test_unparsable_last_sync_is_none(store):
    await store._set(SettingsStore.LAST_SYNC, 'yesterday')

    assert await store.load_last_sync() is None


# ============================================================================
# TEST: theme
# ============================================================================

@pytest.mark.asyncio
async def test_theme_mode_round_trip(store):
    await store.save_theme_mode(ThemeMode.DARK)
    assert await store.load_theme_mode() is ThemeMode.DARK

    await store.save_theme_mode(ThemeMode.LIGHT)
    assert await store.load_theme_mode() is ThemeMode.LIGHT


@pytest.mark.asyncio
async def test_saving_system_theme_clears_stored_value(store):
    await store.save_theme_mode(ThemeMode.DARK)

    await store.save_theme_mode(ThemeMode.SYSTEM)

    assert await store._get(SettingsStore.THEME_MODE) is None
    assert await store.load_theme_mode() is ThemeMode.SYSTEM


@pytest.mark.asyncio
async def test_drop_tables_removes_settings(database, store):
    await store.save_api_key('abc')

    await database.drop_tables()
    await database.create_tables()

    assert await store.load_api_key() is None
