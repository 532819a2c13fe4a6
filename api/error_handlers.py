import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	ApiKeyMissingError,
	InvalidDaysError,
	InvalidSettingError,
	MockModeEnabledError,
	PremiumPlanRequiredError,
	ProviderAPIError,
	ProviderError,
	ProviderHTTPError,
	SyncInProgressError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ApiKeyMissingError)
	async def api_key_missing_handler(request: Request, exc: ApiKeyMissingError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(InvalidSettingError)
	async def invalid_setting_handler(request: Request, exc: InvalidSettingError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(PremiumPlanRequiredError)
	async def premium_required_handler(request: Request, exc: PremiumPlanRequiredError):
		return JSONResponse(status_code=403, content={'detail': str(exc)})

	@app.exception_handler(MockModeEnabledError)
	async def mock_mode_handler(request: Request, exc: MockModeEnabledError):
		return JSONResponse(status_code=409, content={'detail': str(exc)})

	@app.exception_handler(SyncInProgressError)
	async def sync_in_progress_handler(request: Request, exc: SyncInProgressError):
		return JSONResponse(status_code=409, content={'detail': str(exc)})

	@app.exception_handler(InvalidDaysError)
	async def invalid_days_handler(request: Request, exc: InvalidDaysError):
		return JSONResponse(status_code=422, content={'detail': str(exc)})

	@app.exception_handler(ProviderHTTPError)
	async def provider_http_error_handler(request: Request, exc: ProviderHTTPError):
		logger.error(f'Provider HTTP error: {exc}')
		return JSONResponse(
			status_code=502,
			content={'detail': str(exc), 'status_code': exc.status_code, 'body': exc.body},
		)

	@app.exception_handler(ProviderAPIError)
	async def provider_api_error_handler(request: Request, exc: ProviderAPIError):
		logger.error(f'Provider API error: {exc}')
		return JSONResponse(status_code=502, content={'detail': str(exc), 'error': exc.payload})

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(status_code=503, content={'detail': str(exc)})
