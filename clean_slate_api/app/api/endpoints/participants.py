"""
Participant endpoints.

Routes for submitting, listing, filtering and clearing participant
records.  The fixed paths (``/search``, ``/office/...``,
``/profile/...``) are declared before ``/{participant_id}`` so they
are not captured by it.  ``participant_id`` is a string: a non‑numeric
id gets the same 404 as an unknown one.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from clean_slate_api.app.core.store import ParticipantStore, get_store
from clean_slate_api.app.core.submission import FORM_MEDIA_TYPE, JSON_MEDIA_TYPE, read_submission
from clean_slate_api.app.schemas.participant import (
    ErrorResponse,
    MessageResponse,
    Participant,
    ParticipantCreate,
)

router = APIRouter()

# The body is read by ``read_submission`` rather than a model parameter,
# so it is described for the OpenAPI document here.
SUBMISSION_BODY = {
    "requestBody": {
        "required": False,
        "content": {
            JSON_MEDIA_TYPE: {"schema": ParticipantCreate.model_json_schema()},
            FORM_MEDIA_TYPE: {"schema": {"type": "object", "additionalProperties": True}},
        },
    }
}


@router.get("", response_model=List[Participant], response_model_exclude_unset=True)
async def list_participants(store: ParticipantStore = Depends(get_store)) -> List[Participant]:
    """Return every participant in submission order."""
    return store.list_all()


@router.get("/search", response_model=List[Participant], response_model_exclude_unset=True)
async def search_participants(
    q: Optional[str] = Query(None, description="Case‑insensitive text matched against name, office and profile"),
    store: ParticipantStore = Depends(get_store),
) -> List[Participant]:
    """Search participants; without ``q`` all participants are returned."""
    return store.search(q)


@router.get("/office/{office}", response_model=List[Participant], response_model_exclude_unset=True)
async def participants_by_office(office: str, store: ParticipantStore = Depends(get_store)) -> List[Participant]:
    """Participants whose office contains ``office`` (code or name fragment)."""
    return store.filter_by_office(office)


@router.get("/profile/{profile}", response_model=List[Participant], response_model_exclude_unset=True)
async def participants_by_profile(profile: str, store: ParticipantStore = Depends(get_store)) -> List[Participant]:
    """Participants whose audience profile equals ``profile`` exactly."""
    return store.filter_by_profile(profile)


@router.get(
    "/{participant_id}",
    response_model=Participant,
    response_model_exclude_unset=True,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_participant(participant_id: str, store: ParticipantStore = Depends(get_store)) -> Participant:
    """Retrieve a single participant by ID.

    Returns HTTP 404 if no participant has this id.
    """
    return store.get_by_id(participant_id)


@router.post(
    "",
    response_model=Participant,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=SUBMISSION_BODY,
)
async def create_participant(
    fields: Dict[str, Any] = Depends(read_submission),
    store: ParticipantStore = Depends(get_store),
) -> Participant:
    """Store a survey submission sent as JSON or as a urlencoded form.

    Every submitted key is kept and an empty body is a valid
    submission; ``id`` and ``timestamp`` are set by the server.
    """
    return store.insert(fields)


@router.delete("", response_model=MessageResponse)
async def delete_all_participants(store: ParticipantStore = Depends(get_store)) -> MessageResponse:
    """Delete every participant and restart ids at 1."""
    store.clear()
    return MessageResponse(message="All participants deleted")
