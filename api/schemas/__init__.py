from .requests import (
	ApiKeyRequest,
	FavoritesRequest,
	MultiConversionRequest,
	ThemeRequest,
	ToggleRequest,
)
from .responses import (
	ConversionResponse,
	CurrenciesResponse,
	CurrencyInfo,
	HistoryPointResponse,
	HistoryResponse,
	MultiConversionResponse,
	RatesResponse,
	SettingsResponse,
	SyncResponse,
)

__all__ = [
	'ApiKeyRequest',
	'ConversionResponse',
	'CurrenciesResponse',
	'CurrencyInfo',
	'FavoritesRequest',
	'HistoryPointResponse',
	'HistoryResponse',
	'MultiConversionRequest',
	'MultiConversionResponse',
	'RatesResponse',
	'SettingsResponse',
	'SyncResponse',
	'ThemeRequest',
	'ToggleRequest',
]
