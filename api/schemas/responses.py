from datetime import date as date_type
from datetime import datetime

from pydantic import BaseModel, Field

from domain.models.currency import ThemeMode


class CurrencyInfo(BaseModel):
	code: str
	name: str
	flag: str


class CurrenciesResponse(BaseModel):
	favorites: list[CurrencyInfo]
	currencies: list[CurrencyInfo] = Field(..., description='Non-favourite currencies')


class RatesResponse(BaseModel):
	anchor: str
	source: str
	rates: dict[str, float]
	last_sync: datetime | None
	status: str


class ConversionResponse(BaseModel):
	from_currency: str
	to_currency: str
	original_amount: float | None
	converted_amount: float | None
	display_amount: str = Field(..., description='Converted amount, 2 decimals, empty if unparsable')
	exchange_rate: float
	rate_text: str
	timestamp: datetime | None
	source: str


class MultiConversionResponse(BaseModel):
	base_currency: str
	currencies: list[str]
	amounts: list[str]
	source: str


class HistoryPointResponse(BaseModel):
	date: date_type
	rate: float


class HistoryResponse(BaseModel):
	base: str
	quote: str
	points: list[HistoryPointResponse]
	min_rate: float | None
	max_rate: float | None
	lower_bound: float | None
	upper_bound: float | None


class SyncResponse(BaseModel):
	currencies: int
	last_sync: datetime | None
	status: str


class SettingsResponse(BaseModel):
	has_api_key: bool
	use_mock_rates: bool
	has_premium_plan: bool
	favorite_currencies: list[str]
	last_sync: datetime | None
	theme_mode: ThemeMode
