from pydantic import BaseModel, Field, field_validator, model_validator

from domain.models.currency import ThemeMode


def _normalize_codes(codes: list[str]) -> list[str]:
	return [code.strip().upper() for code in codes]


class MultiConversionRequest(BaseModel):
	currencies: list[str] = Field(..., min_length=1, description='Row currencies, base first')
	amounts: list[str] = Field(..., min_length=1, description='Row amounts as typed')
	rotate: bool = Field(default=False, description='Rotate rows clockwise before converting')

	@field_validator('currencies')
	@classmethod
	def normalize_currencies(cls, v: list[str]) -> list[str]:
		return _normalize_codes(v)

	@model_validator(mode='after')
	def same_length(self):
		if len(self.currencies) != len(self.amounts):
			raise ValueError('currencies and amounts must have the same length')
		return self


class ApiKeyRequest(BaseModel):
	api_key: str = Field(..., description='exchangeratesapi.io access key')


class ToggleRequest(BaseModel):
	enabled: bool


class FavoritesRequest(BaseModel):
	currencies: list[str] = Field(..., min_length=3, max_length=3)

	@field_validator('currencies')
	@classmethod
	def normalize_currencies(cls, v: list[str]) -> list[str]:
		return _normalize_codes(v)


class ThemeRequest(BaseModel):
	theme_mode: ThemeMode
