"""Availability of reports for public search.

A report is available when no tunggakan entry shares its (nama, kelas) pair,
compared case-insensitively. Availability is recomputed from both tables on
every call and never stored.

Both tables are read in full and the difference is taken in process. That is
fine while a school has a few thousand rows; if the tables grow well beyond
that, this is the first place to move to a server-side anti-join.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

from raport_santri.services.reports import ReportData, get_all_reports
from raport_santri.services.tunggakan import get_tunggakan

RecordT = TypeVar("RecordT", bound=Mapping)


def match_key(record: Mapping) -> tuple[str, str]:
    """Return the case-insensitive (nama, kelas) identity of a record."""
    return record["nama"].lower(), record["kelas"].lower()


def filter_available(reports: Sequence[RecordT], fees: Iterable[Mapping]) -> list[RecordT]:
    """Return the reports whose (nama, kelas) matches no fee entry.

    Input order is preserved and neither input is modified.
    """
    blocked = {match_key(fee) for fee in fees}
    return [report for report in reports if match_key(report) not in blocked]


def get_available_reports() -> list[ReportData]:
    """Return all available reports ordered by student name.

    Raises:
        RecordStoreError: If either table cannot be read.
    """
    return filter_available(get_all_reports(), get_tunggakan())
