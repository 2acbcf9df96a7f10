"""Public download route for stored report PDFs."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from raport_santri.models.errors import StorageError
from raport_santri.models.upload import PDF_CONTENT_TYPE
from raport_santri.services.storage import BUCKET_NAME, resolve_object_path

router = APIRouter(prefix="/storage", tags=["files"])


@router.get(f"/{BUCKET_NAME}/{{object_path:path}}")
def download_report_file(object_path: str) -> FileResponse:
    """Stream a stored report PDF."""
    try:
        path = resolve_object_path(object_path)
    except StorageError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

    return FileResponse(path, media_type=PDF_CONTENT_TYPE, filename=path.name)
