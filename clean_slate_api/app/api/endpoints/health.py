"""
Health check endpoint.

Reports liveness, the number of stored participants and the seconds
elapsed since the application was created.
"""

import time

from fastapi import APIRouter, Depends, Request

from clean_slate_api.app.core.store import ParticipantStore, get_store
from clean_slate_api.app.schemas.participant import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus)
async def health(request: Request, store: ParticipantStore = Depends(get_store)) -> HealthStatus:
    uptime = time.monotonic() - request.app.state.started_at
    return HealthStatus(status="healthy", participant_count=len(store), uptime=uptime)
