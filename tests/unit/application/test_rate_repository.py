# nosec B101


import pytest
from datetime import date, datetime
from unittest.mock import AsyncMock

from application.services.rate_repository import RateRepository, build_mock_rates
from domain.exceptions.currency import InvalidDaysError, ProviderHTTPError
from domain.models.currency import HistoryPoint
from infrastructure.persistence.repositories.settings import SettingsStore

NOW = datetime(2025, 11, 5, 14, 30)


@pytest.fixture
def mock_provider():
    provider = AsyncMock()
    provider.name = 'exchangeratesapi'
    return provider


@pytest.fixture
def mock_store():
    store = AsyncMock(spec=SettingsStore)
    store.load_use_mock_rates.return_value = True
    return store


@pytest.fixture
def repository(mock_provider, mock_store):
    return RateRepository(mock_provider, mock_store, clock=lambda: NOW)


# ============================================================================
# TEST: build_mock_rates()
# ============================================================================

def test_build_mock_rates_sorted_incremental_values():
    rates = build_mock_rates({'USD', 'CHF', 'EUR'})

    assert list(rates) == ['CHF', 'EUR', 'USD']
    assert rates == {'CHF': 1.00, 'EUR': 1.01, 'USD': 1.02}


def test_build_mock_rates_is_deterministic_and_idempotent():
    codes = {'SEK', 'AUD', 'JPY', 'GBP', 'NZD', 'CAD'}

    first = build_mock_rates(codes)
    second = build_mock_rates(codes)

    assert first == second
    values = list(first.values())
    assert values[0] == 1.0
    for previous, current in zip(values, values[1:]):
        assert current - previous == pytest.approx(0.01)


def test_build_mock_rates_ignores_duplicates():
    assert build_mock_rates(['EUR', 'EUR', 'USD']) == {'EUR': 1.0, 'USD': 1.01}


# ============================================================================
# TEST: get_rates() / get_currency_codes()
# ============================================================================

def test_initial_mock_table_covers_base_codes(repository):
    rates = repository.get_rates(True)

    assert sorted(rates) == ['AUD', 'CAD', 'CHF', 'CNY', 'EUR', 'GBP', 'JPY', 'NZD', 'SEK', 'USD']
    assert rates['AUD'] == 1.0
    assert rates['USD'] == 1.09


def test_live_rates_fall_back_to_mock_before_first_sync(repository):
    assert repository.has_live_rates is False
    assert repository.get_rates(False) == repository.get_rates(True)


def test_get_rates_returns_a_copy(repository):
    rates = repository.get_rates(True)
    rates['EUR'] = 99.0

    assert repository.get_rates(True)['EUR'] != 99.0


@pytest.mark.parametrize('use_mock', [True, False])
def test_currency_codes_are_sorted_keys_of_rates(repository, use_mock):
    codes = repository.get_currency_codes(use_mock)

    assert codes == sorted(codes)
    assert len(codes) == len(set(codes))
    assert set(codes) == set(repository.get_rates(use_mock))


@pytest.mark.asyncio
async def test_currency_codes_follow_live_table_after_sync(repository, mock_provider):
    mock_provider.fetch_latest_rates.return_value = {'USD': 1.08, 'EUR': 1.0, 'BTC': 0.00002}

    await repository.sync_live_rates()

    assert repository.get_currency_codes(False) == ['BTC', 'EUR', 'USD']
    assert 'AUD' in repository.get_currency_codes(True)


@pytest.mark.asyncio
async def test_load_last_sync_reads_store(repository, mock_store):
    mock_store.load_last_sync.return_value = datetime(2025, 11, 1, 8, 0)

    result = await repository.load_last_sync()

    assert result == datetime(2025, 11, 1, 8, 0)
    assert repository.last_sync == datetime(2025, 11, 1, 8, 0)


# ============================================================================
# TEST: sync_live_rates()
# ============================================================================

@pytest.mark.asyncio
async def test_sync_live_rates_replaces_live_table(repository, mock_provider, mock_store):
    live = {'EUR': 1.0, 'USD': 1.0842, 'CHF': 0.9421}
    mock_provider.fetch_latest_rates.return_value = live

    result = await repository.sync_live_rates()

    assert result == live
    assert repository.get_rates(False) == live
    assert repository.has_live_rates is True
    assert repository.last_sync == NOW
    mock_store.save_last_sync.assert_awaited_once_with(NOW)


@pytest.mark.asyncio
async def test_sync_live_rates_grows_currency_set_and_regenerates_mock(repository, mock_provider):
    mock_provider.fetch_latest_rates.return_value = {'EUR': 1.0, 'AAA': 2.0, 'ZZZ': 3.0}

    await repository.sync_live_rates()

    mock = repository.get_rates(True)
    assert 'AAA' in mock and 'ZZZ' in mock
    assert mock == build_mock_rates(repository.currency_set)
    assert mock['AAA'] == 1.0
    assert mock['AUD'] == 1.01


@pytest.mark.asyncio
async def test_currency_set_never_shrinks(repository, mock_provider):
    mock_provider.fetch_latest_rates.return_value = {'EUR': 1.0, 'XYZ': 5.0}
    await repository.sync_live_rates()

    mock_provider.fetch_latest_rates.return_value = {'EUR': 1.0}
    await repository.sync_live_rates()

    assert 'XYZ' in repository.currency_set
    assert 'XYZ' in repository.get_rates(True)
    assert repository.get_rates(False) == {'EUR': 1.0}


@pytest.mark.asyncio
async def test_failed_sync_leaves_state_unchanged(repository, mock_provider, mock_store):
    mock_provider.fetch_latest_rates.side_effect = ProviderHTTPError(500, 'boom')
    mock_before = repository.get_rates(True)

    with pytest.raises(ProviderHTTPError):
        await repository.sync_live_rates()

    assert repository.has_live_rates is False
    assert repository.last_sync is None
    assert repository.get_rates(True) == mock_before
    mock_store.save_last_sync.assert_not_called()


@pytest.mark.asyncio
async def test_failed_sync_keeps_previous_live_table(repository, mock_provider):
    mock_provider.fetch_latest_rates.return_value = {'EUR': 1.0, 'USD': 1.1}
    await repository.sync_live_rates()

    mock_provider.fetch_latest_rates.side_effect = ProviderHTTPError(502, 'bad gateway')
    with pytest.raises(ProviderHTTPError):
        await repository.sync_live_rates()

    assert repository.get_rates(False) == {'EUR': 1.0, 'USD': 1.1}


# ============================================================================
# TEST: fetch_historical_rates() - validation
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize('use_mock', [True, False, None])
@pytest.mark.parametrize('days', [0, -1])
async def test_historical_rejects_invalid_days_without_io(repository, mock_provider, mock_store, use_mock, days):
    with pytest.raises(InvalidDaysError):
        await repository.fetch_historical_rates('CHF', 'EUR', days=days, use_mock=use_mock)

    mock_provider.fetch_historical_rates.assert_not_called()
    mock_store.load_use_mock_rates.assert_not_called()


# ============================================================================
# TEST: fetch_historical_rates() - mock mode
# ============================================================================

@pytest.mark.asyncio
async def test_mock_history_five_days(repository, mock_provider):
    mock = repository.get_rates(True)
    cross = mock['EUR'] / mock['CHF']

    points = await repository.fetch_historical_rates('CHF', 'EUR', days=5, use_mock=True)

    assert [p.date for p in points] == [
        date(2025, 11, 1), date(2025, 11, 2), date(2025, 11, 3), date(2025, 11, 4), date(2025, 11, 5)
    ]
    expected = [cross * f for f in (0.997, 0.9985, 1.0, 1.0015, 1.003)]
    assert [p.rate for p in points] == pytest.approx(expected)
    mock_provider.fetch_historical_rates.assert_not_called()


@pytest.mark.asyncio
async def test_mock_history_single_day_is_unperturbed(repository):
    mock = repository.get_rates(True)

    points = await repository.fetch_historical_rates('USD', 'JPY', days=1, use_mock=True)

    assert len(points) == 1
    assert isinstance(points[0], HistoryPoint)
    assert points[0].date == date(2025, 11, 5)
    assert points[0].rate == pytest.approx(mock['JPY'] / mock['USD'])


@pytest.mark.asyncio
async def test_mock_history_even_days_is_symmetric(repository):
    points = await repository.fetch_historical_rates('EUR', 'EUR', days=4, use_mock=True)

    assert [p.rate for p in points] == pytest.approx([0.99775, 0.99925, 1.00075, 1.00225])


@pytest.mark.asyncio
async def test_mock_history_unknown_codes_use_one(repository):
    points = await repository.fetch_historical_rates('XXX', 'YYY', days=1, use_mock=True)

    assert points[0].rate == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_history_reads_mock_flag_from_store(repository, mock_store, mock_provider):
    mock_store.load_use_mock_rates.return_value = True

    points = await repository.fetch_historical_rates('CHF', 'EUR', days=2)

    assert len(points) == 2
    mock_store.load_use_mock_rates.assert_awaited_once()
    mock_provider.fetch_historical_rates.assert_not_called()


# ============================================================================
# TEST: fetch_historical_rates() - live mode
# ============================================================================

@pytest.mark.asyncio
async def test_live_history_sorts_dates_and_computes_cross_rate(repository, mock_provider):
    mock_provider.fetch_historical_rates.return_value = {
        date(2025, 11, 5): {'CHF': 0.94, 'USD': 1.08},
        date(2025, 11, 4): {'CHF': 0.95, 'USD': 1.07},
        date(2025, 11, 3): {'CHF': 0.96, 'USD': 1.06},
    }

    points = await repository.fetch_historical_rates('CHF', 'USD', days=3, use_mock=False)

    assert [p.date for p in points] == [date(2025, 11, 3), date(2025, 11, 4), date(2025, 11, 5)]
    assert [p.rate for p in points] == pytest.approx([1.06 / 0.96, 1.07 / 0.95, 1.08 / 0.94])
    mock_provider.fetch_historical_rates.assert_awaited_once_with('CHF', 'USD', 3)


@pytest.mark.asyncio
async def test_live_history_skips_days_missing_a_symbol(repository, mock_provider):
    mock_provider.fetch_historical_rates.return_value = {
        date(2025, 11, 5): {'CHF': 0.94, 'USD': 1.08},
        date(2025, 11, 4): {'CHF': 0.95},
        date(2025, 11, 3): {'USD': 1.06},
        date(2025, 11, 2): {},
    }

    points = await repository.fetch_historical_rates('CHF', 'USD', days=4, use_mock=False)

    assert len(points) == 1
    assert points[0].date == date(2025, 11, 5)


@pytest.mark.asyncio
async def test_live_history_propagates_provider_errors(repository, mock_provider):
    mock_provider.fetch_historical_rates.side_effect = ProviderHTTPError(500, 'boom')

    with pytest.raises(ProviderHTTPError):
        await repository.fetch_historical_rates('CHF', 'USD', days=5, use_mock=False)


# ============================================================================
# TEST: metadata
# ============================================================================

def test_flag_and_name_lookups(repository):
    assert repository.flag_for('CHF') == '🇨🇭'
    assert repository.name_for('CHF') == 'Swiss Franc'
    assert repository.flag_for('QQQ') == '🏳️'
    assert repository.name_for('QQQ') == 'QQQ'
