from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_repository
from application.services import RateRepository

router = APIRouter(tags=['health'])


@router.get('/health', status_code=status.HTTP_200_OK)
async def health(
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
) -> dict:
	return {
		'status': 'ok',
		'live_rates': repository.has_live_rates,
		'last_sync': repository.last_sync,
	}
