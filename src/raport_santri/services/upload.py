"""Batch import of report PDFs from an uploaded ZIP archive."""

from __future__ import annotations

import logging
import time
from uuid import uuid4

from raport_santri.models.upload import (
    ArchiveBlob,
    ArchiveError,
    ExtractedFile,
    FileOutcome,
    UploadOutcome,
)
from raport_santri.services import reports, storage
from raport_santri.services.archive import extract_pdf_files
from raport_santri.utils.naming import format_student_name, storage_slug

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "raports"


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def build_object_path(
    kelas: str,
    display_name: str,
    timestamp_ms: int | None = None,
    token: str | None = None,
) -> str:
    """Return the storage path for a report.

    The filename carries a millisecond timestamp and a random token, e.g.
    ``raports/7A/1700000000000-3f9c2a1b-Ana_Putri.pdf``. Files whose names
    format to the same student name stay apart even within one millisecond.
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    if token is None:
        token = uuid4().hex[:8]
    filename = f"{timestamp_ms}-{token}-{storage_slug(display_name)}.pdf"
    return f"{STORAGE_PREFIX}/{storage_slug(kelas)}/{filename}"


def _process_file(pdf_file: ExtractedFile, kelas: str) -> FileOutcome:
    display_name = format_student_name(pdf_file.name)
    try:
        object_path = storage.upload_object(build_object_path(kelas, display_name), pdf_file.data)
        file_url = storage.get_public_url(object_path)
        saved = reports.save_report(display_name, kelas, file_url)
    except Exception as exc:
        logger.warning("Failed to import %s: %s", pdf_file.name, exc)
        return FileOutcome(
            filename=pdf_file.name,
            ok=False,
            display_name=display_name,
            error=f"Error processing {pdf_file.name}: {_describe(exc)}",
        )
    return FileOutcome(
        filename=pdf_file.name,
        ok=True,
        display_name=display_name,
        report_id=saved["id"],
    )


def process_zip_upload(archive: ArchiveBlob, kelas: str) -> UploadOutcome:
    """Import every qualifying PDF of an archive as a report of *kelas*.

    Files are processed one at a time. A failure while storing or saving one
    file is recorded in its outcome and does not stop the remaining files. If
    the archive itself cannot be extracted, the outcome carries that single
    error and no file is processed.

    The caller must supply a non-empty ``kelas``; it is not validated here.

    Args:
        archive: The uploaded ZIP blob.
        kelas: Class the reports belong to.

    Returns:
        Per-file outcomes with the aggregated success count and errors.
    """
    outcome = UploadOutcome()

    try:
        pdf_files = extract_pdf_files(archive)
    except ArchiveError as exc:
        logger.warning("Rejected archive %s: %s", archive.filename, exc)
        outcome.extraction_error = f"Error extracting ZIP file: {_describe(exc)}"
        return outcome

    for pdf_file in pdf_files:
        outcome.files.append(_process_file(pdf_file, kelas))

    logger.info(
        "Imported %d of %d reports from %s for class %s",
        outcome.success_count,
        len(pdf_files),
        archive.filename,
        kelas,
    )
    return outcome
