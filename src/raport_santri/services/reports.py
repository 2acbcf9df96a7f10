"""Report service for reading and writing report-card rows.

Every function opens its own session and maps ``SQLAlchemyError`` to
``RecordStoreError`` so callers only deal with the service error taxonomy.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TypedDict

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from raport_santri.data.db import get_session
from raport_santri.data.models import Report
from raport_santri.models.errors import RecordStoreError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LIST_LIMIT",
    "ReportData",
    "save_report",
    "get_all_reports",
    "list_reports",
    "delete_report",
    "delete_all_reports",
    "delete_reports_by_class",
]

DEFAULT_LIST_LIMIT = 8


class ReportData(TypedDict):
    """Plain representation of a report row."""

    id: str
    nama: str
    kelas: str
    file_pdf: str
    created_at: datetime


def _report_to_dict(report: Report) -> ReportData:
    return {
        "id": report.id,
        "nama": report.nama,
        "kelas": report.kelas,
        "file_pdf": report.file_pdf,
        "created_at": report.created_at,
    }


def save_report(nama: str, kelas: str, file_url: str) -> ReportData:
    """Persist a report row for an uploaded PDF.

    Args:
        nama: Student display name.
        kelas: Class identifier.
        file_url: Public URL of the stored PDF.

    Returns:
        The saved report.

    Raises:
        RecordStoreError: If the insert fails.
    """
    try:
        with get_session() as session:
            report = Report(nama=nama, kelas=kelas, file_pdf=file_url)
            session.add(report)
            session.flush()
            return _report_to_dict(report)
    except SQLAlchemyError as exc:
        logger.exception("Failed to save report for %s (%s)", nama, kelas)
        raise RecordStoreError(f"Failed to save report: {exc}") from exc


def get_all_reports() -> list[ReportData]:
    """Return every report ordered by student name.

    Raises:
        RecordStoreError: If the query fails.
    """
    try:
        with get_session() as session:
            reports = session.query(Report).order_by(Report.nama.asc(), Report.created_at.asc())
            return [_report_to_dict(report) for report in reports.all()]
    except SQLAlchemyError as exc:
        logger.exception("Failed to load reports")
        raise RecordStoreError(f"Failed to load reports: {exc}") from exc


def list_reports(
    search: str = "",
    kelas: str | None = None,
    page: int = 1,
    limit: int = DEFAULT_LIST_LIMIT,
) -> tuple[list[ReportData], int]:
    """Return one page of all reports for the staff overview, newest first.

    Unlike public search this does not hide reports with outstanding fees.

    Args:
        search: Case-insensitive substring matched against the student name.
        kelas: Exact class filter; empty or None means every class.
        page: 1-based page number.
        limit: Page size.

    Returns:
        Tuple of (reports on the page, total matching reports).

    Raises:
        ValueError: If page or limit is below 1.
        RecordStoreError: If the query fails.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be at least 1")

    try:
        with get_session() as session:
            query = session.query(Report)
            term = search.strip()
            if term:
                query = query.filter(Report.nama.ilike(f"%{term}%"))
            if kelas:
                query = query.filter(Report.kelas == kelas)

            total = query.with_entities(func.count(Report.id)).scalar() or 0
            rows = (
                query.order_by(Report.created_at.desc(), Report.id.asc())
                .offset((page - 1) * limit)
                .limit(limit)
                .all()
            )
            return [_report_to_dict(report) for report in rows], total
    except SQLAlchemyError as exc:
        logger.exception("Failed to list reports")
        raise RecordStoreError(f"Failed to list reports: {exc}") from exc


def delete_report(report_id: str) -> bool:
    """Delete a single report.

    Returns:
        True if a row was deleted, False if no report has that id.

    Raises:
        RecordStoreError: If the delete fails.
    """
    try:
        with get_session() as session:
            report = session.get(Report, report_id)
            if report is None:
                return False
            session.delete(report)
        return True
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete report %s", report_id)
        raise RecordStoreError(f"Failed to delete report: {exc}") from exc


def delete_all_reports() -> int:
    """Delete every report and return how many rows were removed."""
    try:
        with get_session() as session:
            return session.query(Report).delete(synchronize_session=False)
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete all reports")
        raise RecordStoreError(f"Failed to delete reports: {exc}") from exc


def delete_reports_by_class(kelas: str) -> int:
    """Delete every report of one class and return how many rows were removed."""
    try:
        with get_session() as session:
            return (
                session.query(Report)
                .filter(Report.kelas == kelas)
                .delete(synchronize_session=False)
            )
    except SQLAlchemyError as exc:
        logger.exception("Failed to delete reports for class %s", kelas)
        raise RecordStoreError(f"Failed to delete reports: {exc}") from exc
