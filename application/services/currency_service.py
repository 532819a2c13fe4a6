from collections.abc import Sequence

from application.services.rate_repository import RateRepository


class CurrencyService:
	"""Currency listing and picker search."""

	def __init__(self, repository: RateRepository):
		self.repository = repository

	def options(self, use_mock: bool) -> list[str]:
		return self.repository.get_currency_codes(use_mock)

	def describe(self, code: str) -> dict:
		return {
			'code': code,
			'name': self.repository.name_for(code),
			'flag': self.repository.flag_for(code),
		}

	def _matches(self, code: str, query: str) -> bool:
		return query in code.lower() or query in self.repository.name_for(code).lower()

	def search(
		self, query: str, options: Sequence[str], favorites: Sequence[str]
	) -> tuple[list[str], list[str]]:
		"""Split `options` into (favourites, others), both filtered by `query`."""
		favorite_options = [code for code in favorites if code in options]
		others = [code for code in options if code not in favorite_options]

		q = query.strip().lower()
		if q:
			favorite_options = [code for code in favorite_options if self._matches(code, q)]
			others = [code for code in others if self._matches(code, q)]
		return favorite_options, others
