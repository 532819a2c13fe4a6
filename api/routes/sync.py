from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_repository, get_sync_service
from api.schemas import SyncResponse
from application.services import RateRepository, SyncService


router = APIRouter(prefix='/api', tags=['sync'])


@router.post(
	'/sync',
	response_model=SyncResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch the latest live rates',
)
async def synchronize(
	service: Annotated[SyncService, Depends(get_sync_service)],
	repository: Annotated[RateRepository, Depends(get_rate_repository)],
) -> SyncResponse:
	rates = await service.synchronize()
	return SyncResponse(
		currencies=len(rates),
		last_sync=repository.last_sync,
		status=service.status_text(use_mock=False),
	)
