"""Transient (non-persisted) data models and error types."""

from raport_santri.models.errors import ExternalServiceError, RecordStoreError, StorageError
from raport_santri.models.upload import (
    ArchiveBlob,
    ArchiveEntry,
    ArchiveError,
    ArchiveReadError,
    ExtractedFile,
    FileOutcome,
    InvalidArchiveFormat,
    NoQualifyingFilesError,
    UploadOutcome,
)

__all__ = [
    "ArchiveBlob",
    "ArchiveEntry",
    "ArchiveError",
    "ArchiveReadError",
    "ExtractedFile",
    "ExternalServiceError",
    "FileOutcome",
    "InvalidArchiveFormat",
    "NoQualifyingFilesError",
    "RecordStoreError",
    "StorageError",
    "UploadOutcome",
]
