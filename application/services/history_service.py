from application.services.rate_repository import RateRepository
from domain.exceptions.currency import InvalidDaysError, PremiumPlanRequiredError
from domain.models.currency import HistoryChart, HistoryPoint
from infrastructure.persistence.repositories.settings import SettingsStore

# Minimum visible y-range for a flat series
FLAT_SERIES_PADDING = 0.001
# Live history costs one provider request per day
MAX_HISTORY_DAYS = 31


def chart_for(base: str, quote: str, points: list[HistoryPoint]) -> HistoryChart:
	if not points:
		return HistoryChart(base=base, quote=quote, points=[])

	min_rate = min(p.rate for p in points)
	max_rate = max(p.rate for p in points)
	lower, upper = min_rate, max_rate
	if abs(upper - lower) < 1e-6:
		lower -= FLAT_SERIES_PADDING
		upper += FLAT_SERIES_PADDING

	return HistoryChart(
		base=base,
		quote=quote,
		points=points,
		min_rate=min_rate,
		max_rate=max_rate,
		lower_bound=lower,
		upper_bound=upper,
	)


class HistoryService:
	def __init__(
		self, repository: RateRepository, settings_store: SettingsStore, default_days: int = 5
	):
		self.repository = repository
		self.settings_store = settings_store
		self.default_days = default_days

	async def load_chart(self, base: str, quote: str, days: int | None = None) -> HistoryChart:
		if days is None:
			days = self.default_days
		if days < 1:
			raise InvalidDaysError(days)

		use_mock = await self.settings_store.load_use_mock_rates()
		# the free plan has no historical endpoint
		if not use_mock and not await self.settings_store.load_has_premium_plan():
			raise PremiumPlanRequiredError()

		points = await self.repository.fetch_historical_rates(
			base,
			quote,
			days=days,
			use_mock=use_mock,
		)
		return chart_for(base, quote, points)
