"""
Statistics endpoint.

Returns counts and distributions computed from the current
participants.  Values are recomputed on each call.
"""

from fastapi import APIRouter, Depends

from clean_slate_api.app.core.store import ParticipantStore, get_store
from clean_slate_api.app.schemas.participant import ParticipantStatistics
from clean_slate_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("", response_model=ParticipantStatistics)
async def get_statistics(store: ParticipantStore = Depends(get_store)) -> ParticipantStatistics:
    return StatisticsService.compute(store)
