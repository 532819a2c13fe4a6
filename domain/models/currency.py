from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

# Units of each currency per one unit of the anchor currency.
RateTable = dict[str, float]


@dataclass(frozen=True)
class HistoryPoint:
	date: date
	rate: float  # cross rate base -> quote on that day


class ThemeMode(str, Enum):
	LIGHT = 'light'
	DARK = 'dark'
	SYSTEM = 'system'


@dataclass(frozen=True)
class AppSettings:
	api_key: str | None
	use_mock_rates: bool
	has_premium_plan: bool
	favorite_currencies: list[str]
	last_sync: datetime | None
	theme_mode: ThemeMode


@dataclass(frozen=True)
class HistoryChart:
	base: str
	quote: str
	points: list[HistoryPoint] = field(default_factory=list)
	min_rate: float | None = None
	max_rate: float | None = None
	lower_bound: float | None = None  # padded y-axis range
	upper_bound: float | None = None
