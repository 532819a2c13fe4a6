from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_history_service
from api.schemas import HistoryPointResponse, HistoryResponse
from application.services import HistoryService
from application.services.history_service import MAX_HISTORY_DAYS

router = APIRouter(prefix='/api', tags=['history'])


@router.get(
	'/history/{base}/{quote}',
	response_model=HistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Daily cross-rate history, oldest first',
)
async def get_history(
	base: Annotated[str, Path(min_length=3, max_length=10)],
	quote: Annotated[str, Path(min_length=3, max_length=10)],
	service: Annotated[HistoryService, Depends(get_history_service)],
	days: Annotated[int | None, Query(le=MAX_HISTORY_DAYS)] = None,
) -> HistoryResponse:
	chart = await service.load_chart(base.upper(), quote.upper(), days)
	return HistoryResponse(
		base=chart.base,
		quote=chart.quote,
		points=[HistoryPointResponse(date=p.date, rate=p.rate) for p in chart.points],
		min_rate=chart.min_rate,
		max_rate=chart.max_rate,
		lower_bound=chart.lower_bound,
		upper_bound=chart.upper_bound,
	)
