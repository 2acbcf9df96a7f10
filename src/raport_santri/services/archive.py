"""Extraction of report PDFs from uploaded ZIP archives."""

from __future__ import annotations

import io
import zlib
from zipfile import BadZipFile, ZipFile, ZipInfo

from raport_santri.models.upload import (
    ArchiveBlob,
    ArchiveEntry,
    ArchiveReadError,
    ExtractedFile,
    InvalidArchiveFormat,
    NoQualifyingFilesError,
)

ZIP_CONTENT_TYPES = frozenset({"application/zip", "application/x-zip-compressed"})
GENERIC_CONTENT_TYPES = frozenset({"", "application/octet-stream"})
MACOS_METADATA_MARKER = "__macosx"

_ENTRY_READ_ERRORS = (BadZipFile, EOFError, NotImplementedError, OSError, RuntimeError, zlib.error)


def _ensure_zip_container(archive: ArchiveBlob) -> None:
    """Validate that the blob declares itself as a ZIP archive.

    Clients that send no content type, or a generic one, are judged by the
    ``.zip`` filename suffix instead.

    Raises:
        InvalidArchiveFormat: If the blob is not a ZIP container.
    """
    content_type = (archive.content_type or "").split(";", 1)[0].strip().lower()
    if content_type in ZIP_CONTENT_TYPES:
        return
    if content_type in GENERIC_CONTENT_TYPES and archive.filename.lower().endswith(".zip"):
        return
    raise InvalidArchiveFormat("File must be a ZIP archive")


def _open_zip(archive: ArchiveBlob) -> ZipFile:
    try:
        return ZipFile(io.BytesIO(archive.data))
    except (BadZipFile, OSError) as exc:
        raise ArchiveReadError(f"Failed to extract ZIP file: {exc}") from exc


def _to_entry(info: ZipInfo) -> ArchiveEntry:
    return ArchiveEntry(raw_path=info.filename, is_directory=info.is_dir())


def is_qualifying_entry(entry: ArchiveEntry) -> bool:
    """Return True when *entry* is a PDF worth importing.

    Directory markers, non-PDF files, macOS resource-fork folders and hidden
    dotfiles are rejected.
    """
    if entry.is_directory:
        return False
    lowered_path = entry.raw_path.lower()
    if not lowered_path.endswith(".pdf"):
        return False
    if MACOS_METADATA_MARKER in lowered_path:
        return False
    return not entry.leaf_name.lower().startswith(".")


def extract_pdf_files(archive: ArchiveBlob) -> list[ExtractedFile]:
    """Extract the qualifying PDF files from an uploaded archive.

    Every entry is examined in one pass. Qualifying files are keyed by their
    leaf name, so two PDFs with the same name in different folders collapse
    into one (the later entry's content wins).

    Args:
        archive: The uploaded ZIP blob.

    Returns:
        Extracted PDFs in archive order.

    Raises:
        InvalidArchiveFormat: If the blob is not a ZIP container.
        ArchiveReadError: If the archive or one of its PDFs cannot be read.
        NoQualifyingFilesError: If the archive contains no usable PDFs.
    """
    _ensure_zip_container(archive)

    extracted: dict[str, ExtractedFile] = {}
    seen_files: list[str] = []

    with _open_zip(archive) as zip_file:
        for info in zip_file.infolist():
            entry = _to_entry(info)
            if entry.is_directory:
                continue
            seen_files.append(entry.raw_path)
            if not is_qualifying_entry(entry):
                continue

            leaf_name = entry.leaf_name
            try:
                data = zip_file.read(info)
            except _ENTRY_READ_ERRORS as exc:
                raise ArchiveReadError(f"Failed to extract ZIP file: {exc}") from exc
            extracted[leaf_name] = ExtractedFile(name=leaf_name, data=data)

    if not extracted:
        raise NoQualifyingFilesError(seen_files)

    return list(extracted.values())
