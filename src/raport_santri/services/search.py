"""Public report search with class filtering and pagination."""

from __future__ import annotations

from dataclasses import dataclass, field

from raport_santri.services.availability import get_available_reports
from raport_santri.services.reports import ReportData

DEFAULT_PAGE_SIZE = 8


@dataclass(slots=True)
class SearchResult:
    """One page of search results.

    Attributes:
        records: Reports on the requested page.
        total: Number of reports matching the filters across all pages.
    """

    records: list[ReportData] = field(default_factory=list)
    total: int = 0


def _matches(report: ReportData, term: str, match_class: bool) -> bool:
    if term in report["nama"].lower():
        return True
    return match_class and term in report["kelas"].lower()


def search_reports(
    query: str = "",
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    kelas: str | None = None,
    *,
    match_class: bool = False,
) -> SearchResult:
    """Search available reports.

    Reports hidden by a tunggakan entry are never returned. The class filter
    is an exact match; the query is a case-insensitive substring match on the
    student name, and also on the class when ``match_class`` is set. A blank
    query matches everything.

    Args:
        query: Free-text search term.
        page: 1-based page number.
        limit: Page size.
        kelas: Exact class filter; empty or None means every class.
        match_class: Also match the query against the class name.

    Returns:
        The requested page and the total number of matches.

    Raises:
        ValueError: If page or limit is below 1.
        RecordStoreError: If the record store cannot be read.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be at least 1")

    reports = get_available_reports()
    if kelas:
        reports = [report for report in reports if report["kelas"] == kelas]

    term = query.strip().lower()
    if term:
        reports = [report for report in reports if _matches(report, term, match_class)]

    start = (page - 1) * limit
    return SearchResult(records=reports[start : start + limit], total=len(reports))
