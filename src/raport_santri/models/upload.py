"""Data models for report-card archive uploads."""

from __future__ import annotations

from dataclasses import dataclass, field

PDF_CONTENT_TYPE = "application/pdf"


class ArchiveError(Exception):
    """Base class for failures that abort processing of a whole archive."""


class InvalidArchiveFormat(ArchiveError):
    """Raised when the uploaded blob is not a ZIP container."""


class ArchiveReadError(ArchiveError):
    """Raised when a ZIP container cannot be parsed or an entry cannot be read."""


class NoQualifyingFilesError(ArchiveError):
    """Raised when a readable archive holds no usable PDF files.

    Attributes:
        entries: Full paths of every non-directory entry found in the archive.
    """

    def __init__(self, entries: list[str]) -> None:
        self.entries = list(entries)
        super().__init__(f"No PDF files found in ZIP archive. Files found: {', '.join(entries)}")


@dataclass(frozen=True, slots=True)
class ArchiveBlob:
    """An uploaded archive as received from the caller.

    Attributes:
        filename: Client-supplied name of the upload.
        data: Raw bytes of the upload.
        content_type: Declared MIME type, if the client sent one.
    """

    filename: str
    data: bytes
    content_type: str | None = None


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """A single member of a ZIP archive.

    Only the path metadata is held here so entries can be screened without
    reading their payload. The bytes of a qualifying entry are read afterwards
    and carried by :class:`ExtractedFile`.

    Attributes:
        raw_path: Path of the member as stored in the archive.
        is_directory: Whether the member is a directory marker.
    """

    raw_path: str
    is_directory: bool

    @property
    def leaf_name(self) -> str:
        """Last path segment of the entry."""
        return self.raw_path.rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True, slots=True)
class ExtractedFile:
    """A qualifying PDF materialized from an archive.

    Attributes:
        name: Leaf filename; directories inside the archive are discarded.
        data: File payload.
        content_type: Always ``application/pdf``.
    """

    name: str
    data: bytes
    content_type: str = PDF_CONTENT_TYPE


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of processing one extracted file.

    Attributes:
        filename: Leaf name of the file inside the archive.
        ok: True when upload and persistence both completed.
        display_name: Student name derived from the filename.
        report_id: Identifier of the saved report, on success.
        error: Human-readable failure description, on failure.
    """

    filename: str
    ok: bool
    display_name: str = ""
    report_id: str | None = None
    error: str | None = None


@dataclass(slots=True)
class UploadOutcome:
    """Aggregate result of one archive upload.

    Attributes:
        files: Ordered per-file outcomes.
        extraction_error: Set when the archive itself could not be processed.
    """

    files: list[FileOutcome] = field(default_factory=list)
    extraction_error: str | None = None

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.files if outcome.ok)

    @property
    def errors(self) -> list[str]:
        collected: list[str] = []
        if self.extraction_error is not None:
            collected.append(self.extraction_error)
        collected.extend(outcome.error for outcome in self.files if outcome.error is not None)
        return collected
