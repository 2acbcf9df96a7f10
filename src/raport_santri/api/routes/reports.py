"""Report routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status

from raport_santri.api.dependencies import get_current_staff
from raport_santri.api.schemas.common import DEFAULT_LIMIT, MAX_LIMIT, build_pagination
from raport_santri.api.schemas.reports import (
    BulkDeleteResponse,
    FileOutcomeResponse,
    ReportListResponse,
    ReportResponse,
    UploadOutcomeResponse,
)
from raport_santri.models.errors import ExternalServiceError
from raport_santri.models.upload import ArchiveBlob
from raport_santri.services.reports import (
    delete_all_reports,
    delete_report,
    delete_reports_by_class,
    list_reports,
)
from raport_santri.services.search import search_reports
from raport_santri.services.upload import process_zip_upload

router = APIRouter(prefix="/reports", tags=["reports"])

MAX_UPLOAD_BYTES = 100 * 1024 * 1024


def _bad_gateway(exc: ExternalServiceError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


@router.get(
    "/search",
    response_model=ReportListResponse,
    summary="Search available reports",
    description="Public search. Reports of students with outstanding fees are hidden.",
)
def search_reports_endpoint(
    q: Annotated[str, Query(description="Student name (case-insensitive substring)")] = "",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = DEFAULT_LIMIT,
    kelas: Annotated[str | None, Query(description="Exact class filter")] = None,
    match_class: Annotated[bool, Query(description="Also match q against the class")] = False,
) -> ReportListResponse:
    try:
        result = search_reports(q, page, limit, kelas, match_class=match_class)
    except ExternalServiceError as exc:
        raise _bad_gateway(exc) from exc

    return ReportListResponse(
        items=[ReportResponse(**record) for record in result.records],
        pagination=build_pagination(result.total, page, limit),
    )


@router.get(
    "",
    response_model=ReportListResponse,
    summary="List all reports",
    description="Staff overview of every report, newest first, including hidden ones.",
)
def list_reports_endpoint(
    _staff: Annotated[str, Depends(get_current_staff)],
    search: Annotated[str, Query(description="Student name (case-insensitive substring)")] = "",
    kelas: Annotated[str | None, Query(description="Exact class filter")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_LIMIT)] = DEFAULT_LIMIT,
) -> ReportListResponse:
    try:
        records, total = list_reports(search, kelas, page, limit)
    except ExternalServiceError as exc:
        raise _bad_gateway(exc) from exc

    return ReportListResponse(
        items=[ReportResponse(**record) for record in records],
        pagination=build_pagination(total, page, limit),
    )


@router.post(
    "/upload",
    response_model=UploadOutcomeResponse,
    summary="Upload a ZIP of report PDFs",
    description="Import every PDF in the archive as a report of the given class.",
    responses={
        400: {"description": "Missing class"},
        413: {"description": "Archive too large"},
    },
)
async def upload_reports_endpoint(
    _staff: Annotated[str, Depends(get_current_staff)],
    file: Annotated[UploadFile, File(description="ZIP archive containing report PDFs")],
    kelas: Annotated[str, Form(description="Class the reports belong to")] = "",
) -> UploadOutcomeResponse:
    kelas_clean = kelas.strip()
    if not kelas_clean:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Select a class before uploading a ZIP archive.",
        )

    data = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Archive exceeds 100 MB limit.",
        )

    archive = ArchiveBlob(
        filename=file.filename or "upload.zip",
        data=data,
        content_type=file.content_type,
    )
    outcome = process_zip_upload(archive, kelas_clean)

    return UploadOutcomeResponse(
        kelas=kelas_clean,
        success_count=outcome.success_count,
        errors=outcome.errors,
        files=[
            FileOutcomeResponse(
                filename=item.filename,
                ok=item.ok,
                display_name=item.display_name,
                report_id=item.report_id,
                error=item.error,
            )
            for item in outcome.files
        ],
    )


@router.delete(
    "/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a report",
)
def delete_report_endpoint(
    report_id: str,
    _staff: Annotated[str, Depends(get_current_staff)],
) -> None:
    try:
        deleted = delete_report(report_id)
    except ExternalServiceError as exc:
        raise _bad_gateway(exc) from exc

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Report {report_id} not found",
        )


@router.delete(
    "",
    response_model=BulkDeleteResponse,
    summary="Delete reports in bulk",
    description="Delete every report of one class, or every report when all=true.",
)
def bulk_delete_reports_endpoint(
    _staff: Annotated[str, Depends(get_current_staff)],
    kelas: Annotated[str | None, Query(description="Delete only this class")] = None,
    delete_all: Annotated[
        bool, Query(alias="all", description="Confirm deleting every report")
    ] = False,
) -> BulkDeleteResponse:
    if not kelas and not delete_all:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide kelas to delete one class, or all=true to delete every report.",
        )

    try:
        deleted = delete_reports_by_class(kelas) if kelas else delete_all_reports()
    except ExternalServiceError as exc:
        raise _bad_gateway(exc) from exc

    return BulkDeleteResponse(deleted=deleted, kelas=kelas or None)
