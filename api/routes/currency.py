from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_rate_repository,
	get_settings_store,
	get_sync_service,
)
from api.schemas import (
	ConversionResponse,
	CurrenciesResponse,
	MultiConversionRequest,
	MultiConversionResponse,
	RatesResponse,
)
from application.services import ConversionService, CurrencyService, RateRepository, SyncService
from domain.currencies import ANCHOR_CURRENCY
from infrastructure.persistence.repositories.settings import SettingsStore

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=10)]


@router.get(
	'/currencies',
	response_model=CurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List available currencies, favourites first',
)
async def list_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
	settings_store: Annotated[SettingsStore, Depends(get_settings_store)],
	search: Annotated[str, Query(max_length=50)] = '',
) -> CurrenciesResponse:
	use_mock = await settings_store.load_use_mock_rates()
	favorites = await settings_store.load_favorite_currencies()

	favorite_codes, other_codes = service.search(search, service.options(use_mock), favorites)
	return CurrenciesResponse(
		favorites=[service.describe(code) for code in favorite_codes],
		currencies=[service.describe(code) for code in other_codes],
	)


@router.get(
	'/rates',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Current rate table',
)
async def get_rates(
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
	conversion: Annotated[ConversionService, Depends(get_conversion_service)],
	sync_service: Annotated[SyncService, Depends(get_sync_service)],
	settings_store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> RatesResponse:
	use_mock = await settings_store.load_use_mock_rates()
	return RatesResponse(
		anchor=ANCHOR_CURRENCY,
		source=conversion.rate_source(use_mock),
		rates=repository.get_rates(use_mock),
		last_sync=repository.last_sync,
		status=sync_service.status_text(use_mock),
	)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[str, Path(max_length=32, description="Accepts '.' or ','")],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	settings_store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> ConversionResponse:
	use_mock = await settings_store.load_use_mock_rates()
	result = service.convert(amount, from_currency.upper(), to_currency.upper(), use_mock)
	return ConversionResponse(**result)


@router.post(
	'/convert/multi',
	response_model=MultiConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert the base row into every other row',
)
async def convert_many(
	request: MultiConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	settings_store: Annotated[SettingsStore, Depends(get_settings_store)],
) -> MultiConversionResponse:
	use_mock = await settings_store.load_use_mock_rates()
	result = service.convert_many(
		request.currencies, request.amounts, use_mock=use_mock, rotate=request.rotate
	)
	return MultiConversionResponse(
		base_currency=result.base_currency,
		currencies=result.currencies,
		amounts=result.amounts,
		source=service.rate_source(use_mock),
	)
