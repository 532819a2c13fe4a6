from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_settings_store
from api.schemas import (
	ApiKeyRequest,
	FavoritesRequest,
	SettingsResponse,
	ThemeRequest,
	ToggleRequest,
)
from infrastructure.persistence.repositories.settings import SettingsStore

router = APIRouter(prefix='/api/settings', tags=['settings'])

Store = Annotated[SettingsStore, Depends(get_settings_store)]


async def _settings_response(store: SettingsStore) -> SettingsResponse:
	settings = await store.load_all()
	return SettingsResponse(
		has_api_key=bool(settings.api_key),
		use_mock_rates=settings.use_mock_rates,
		has_premium_plan=settings.has_premium_plan,
		favorite_currencies=settings.favorite_currencies,
		last_sync=settings.last_sync,
		theme_mode=settings.theme_mode,
	)


@router.get('', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def get_app_settings(store: Store) -> SettingsResponse:
	return await _settings_response(store)


@router.put('/api-key', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def save_api_key(request: ApiKeyRequest, store: Store) -> SettingsResponse:
	await store.save_api_key(request.api_key)
	return await _settings_response(store)


@router.put('/mock-rates', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def save_use_mock_rates(request: ToggleRequest, store: Store) -> SettingsResponse:
	await store.save_use_mock_rates(request.enabled)
	return await _settings_response(store)


@router.put('/premium-plan', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def save_has_premium_plan(request: ToggleRequest, store: Store) -> SettingsResponse:
	await store.save_has_premium_plan(request.enabled)
	return await _settings_response(store)


@router.put('/favorites', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def save_favorite_currencies(request: FavoritesRequest, store: Store) -> SettingsResponse:
	await store.save_favorite_currencies(request.currencies)
	return await _settings_response(store)


@router.put('/theme', response_model=SettingsResponse, status_code=status.HTTP_200_OK)
async def save_theme_mode(request: ThemeRequest, store: Store) -> SettingsResponse:
	await store.save_theme_mode(request.theme_mode)
	return await _settings_response(store)
