import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from application.services.rate_repository import RateRepository

T = TypeVar('T')


def cross_rate(rates: Mapping[str, float], from_currency: str, to_currency: str) -> float:
	"""1 `from_currency` = X `to_currency`. Unknown codes count as 1.0."""
	return rates.get(to_currency, 1.0) / rates.get(from_currency, 1.0)


def convert(
	amount: float, from_currency: str, to_currency: str, rates: Mapping[str, float]
) -> float:
	return amount * cross_rate(rates, from_currency, to_currency)


def parse_amount(value: str | float | int) -> float | None:
	"""Lenient number parsing for live typing; accepts ',' as decimal separator."""
	if isinstance(value, (int, float)):
		amount = float(value)
	else:
		text = value.strip().replace(',', '.')
		if not text or '_' in text:
			return None
		try:
			amount = float(text)
		except ValueError:
			return None
	return amount if math.isfinite(amount) else None


def format_amount(value: float) -> str:
	return f'{value:.2f}'


def format_rate(value: float) -> str:
	return f'{value:.6f}'


def rate_text(from_currency: str, to_currency: str, rates: Mapping[str, float]) -> str:
	rate = cross_rate(rates, from_currency, to_currency)
	return f'1 {from_currency} = {format_rate(rate)} {to_currency}'


def rotate_clockwise(
	currencies: Sequence[str], amounts: Sequence[T]
) -> tuple[list[str], list[T]]:
	"""Move the last (currency, amount) pair to the front."""
	if len(currencies) != len(amounts):
		raise ValueError('currencies and amounts must have the same length')
	if not currencies:
		return [], []
	return [currencies[-1], *currencies[:-1]], [amounts[-1], *amounts[:-1]]


def normalize_currencies(currencies: Sequence[str], options: Sequence[str]) -> list[str]:
	"""Replace codes missing from `options` with the option at the same row."""
	if not options:
		return list(currencies)
	return [
		code if code in options else options[i if i < len(options) else 0]
		for i, code in enumerate(currencies)
	]


@dataclass
class SingleConversion:
	from_currency: str
	to_currency: str
	from_text: str = ''
	to_text: str = ''

	def recalculate(self, rates: Mapping[str, float]) -> None:
		amount = parse_amount(self.from_text)
		if amount is None:
			self.to_text = ''
			return
		self.to_text = format_amount(convert(amount, self.from_currency, self.to_currency, rates))

	def swap(self) -> None:
		self.from_currency, self.to_currency = self.to_currency, self.from_currency
		self.from_text, self.to_text = self.to_text, self.from_text

	def rate_text(self, rates: Mapping[str, float]) -> str:
		return rate_text(self.from_currency, self.to_currency, rates)


@dataclass
class MultiConversion:
	"""Rows of (currency, amount); row 0 is the editable base row."""

	currencies: list[str]
	amounts: list[str]

	def __post_init__(self):
		if len(self.currencies) != len(self.amounts):
			raise ValueError('currencies and amounts must have the same length')

	@property
	def base_currency(self) -> str:
		return self.currencies[0]

	def recalculate(self, rates: Mapping[str, float]) -> None:
		if not self.currencies:
			return
		amount = parse_amount(self.amounts[0])
		if amount is None:
			self.amounts[1:] = [''] * (len(self.amounts) - 1)
			return
		base = self.base_currency
		for i in range(1, len(self.currencies)):
			self.amounts[i] = format_amount(convert(amount, base, self.currencies[i], rates))

	def rotate_clockwise(self, rates: Mapping[str, float] | None = None) -> None:
		self.currencies, self.amounts = rotate_clockwise(self.currencies, self.amounts)
		if rates is not None:
			self.recalculate(rates)

	def set_currency(self, index: int, code: str, rates: Mapping[str, float]) -> None:
		self.currencies[index] = code
		self.recalculate(rates)


class ConversionService:
	def __init__(self, repository: RateRepository):
		self.repository = repository

	def rate_source(self, use_mock: bool) -> str:
		if use_mock:
			return 'mock'
		return 'live' if self.repository.has_live_rates else 'mock-fallback'

	def convert(
		self, amount_text: str, from_currency: str, to_currency: str, use_mock: bool
	) -> dict:
		rates = self.repository.get_rates(use_mock)

		conversion = SingleConversion(from_currency, to_currency, from_text=amount_text)
		conversion.recalculate(rates)

		amount = parse_amount(amount_text)
		rate = cross_rate(rates, from_currency, to_currency)

		return {
			'from_currency': from_currency,
			'to_currency': to_currency,
			'original_amount': amount,
			'converted_amount': amount * rate if amount is not None else None,
			'display_amount': conversion.to_text,
			'exchange_rate': rate,
			'rate_text': conversion.rate_text(rates),
			'timestamp': self.repository.last_sync,
			'source': self.rate_source(use_mock),
		}

	def convert_many(
		self,
		currencies: list[str],
		amounts: list[str],
		use_mock: bool,
		rotate: bool = False,
	) -> MultiConversion:
		rates = self.repository.get_rates(use_mock)
		options = self.repository.get_currency_codes(use_mock)
		conversion = MultiConversion(normalize_currencies(currencies, options), list(amounts))
		if rotate:
			conversion.rotate_clockwise(rates)
		else:
			conversion.recalculate(rates)
		return conversion
