from typing import Any


class CurrencyException(Exception):
	pass


class ApiKeyMissingError(CurrencyException):
	def __init__(self, message: str = 'API key not set. Please configure it in Settings.'):
		super().__init__(message)


class InvalidDaysError(CurrencyException, ValueError):
	def __init__(self, days: int):
		self.days = days
		super().__init__(f'days must be >= 1, got {days}')


class InvalidSettingError(CurrencyException):
	pass


class MockModeEnabledError(CurrencyException):
	def __init__(
		self, message: str = 'Mock mode is enabled. Disable it in Settings to fetch live rates.'
	):
		super().__init__(message)


class SyncInProgressError(CurrencyException):
	def __init__(self, message: str = 'A synchronization is already running'):
		super().__init__(message)


class PremiumPlanRequiredError(CurrencyException):
	def __init__(
		self,
		message: str = 'Historical live rates require a Professional or Business plan.',
	):
		super().__init__(message)


class ProviderError(CurrencyException):
	pass


class ProviderHTTPError(ProviderError):
	"""Non-200 response from the provider."""

	def __init__(self, status_code: int, body: str, context: str = 'Failed to fetch rates'):
		self.status_code = status_code
		self.body = body
		super().__init__(f'{context}: HTTP {status_code} - {body}')


class ProviderAPIError(ProviderError):
	"""200 response whose payload reports success: false."""

	def __init__(self, payload: Any, context: str = 'API error'):
		self.payload = payload
		super().__init__(f'{context}: {payload}')


class ProviderRequestError(ProviderError):
	pass
