"""Pydantic schemas for report API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from raport_santri.api.schemas.common import PaginationMeta


class ReportResponse(BaseModel):
    """Response schema for a stored report."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nama: str
    kelas: str
    file_pdf: str
    created_at: datetime


class ReportListResponse(BaseModel):
    """A page of reports with pagination metadata."""

    items: list[ReportResponse]
    pagination: PaginationMeta


class FileOutcomeResponse(BaseModel):
    """Outcome of importing one PDF from an archive."""

    filename: str
    ok: bool
    display_name: str = ""
    report_id: str | None = None
    error: str | None = None


class UploadOutcomeResponse(BaseModel):
    """Result of an archive upload."""

    kelas: str
    success_count: int = Field(ge=0)
    errors: list[str] = Field(default_factory=list)
    files: list[FileOutcomeResponse] = Field(default_factory=list)


class BulkDeleteResponse(BaseModel):
    """Result of a bulk report deletion."""

    deleted: int = Field(ge=0)
    kelas: str | None = None
