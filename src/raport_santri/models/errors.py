"""Errors raised when the record store or object storage fails."""

from __future__ import annotations


class ExternalServiceError(Exception):
    """Raised when a backing service (database or object storage) fails."""


class RecordStoreError(ExternalServiceError):
    """Raised when a read or write against the record store fails."""


class StorageError(ExternalServiceError):
    """Raised when an object cannot be written to or read from storage."""
