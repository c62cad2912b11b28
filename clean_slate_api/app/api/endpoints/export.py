"""
Export endpoints.

``GET /export/csv`` downloads every participant as a CSV attachment
named after the current epoch milliseconds.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from clean_slate_api.app.core.store import ParticipantStore, get_store
from clean_slate_api.app.services.export_service import ExportService

router = APIRouter()


@router.get("/csv", response_class=Response)
async def export_csv(store: ParticipantStore = Depends(get_store)) -> Response:
    csv_text = ExportService.to_csv(store.list_all())
    filename = ExportService.export_filename()
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
