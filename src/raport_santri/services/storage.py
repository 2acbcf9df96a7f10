"""Filesystem-backed object storage for uploaded report PDFs.

Objects live under ``<storage root>/<bucket>/<path>`` and are exposed through
the API at ``<public base url>/storage/<bucket>/<path>``.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from raport_santri.models.errors import StorageError

BUCKET_NAME = "raport-files"
DEFAULT_PUBLIC_BASE_URL = "http://localhost:8000"


def get_storage_root() -> Path:
    """Return the root directory holding every bucket."""
    env_root = os.getenv("RAPORT_STORAGE_DIR")
    if env_root:
        return Path(env_root).expanduser().resolve()

    project_root = Path(__file__).resolve().parents[3]
    return project_root / ".raport_storage"


def get_bucket_root() -> Path:
    """Return the directory backing the report bucket."""
    return get_storage_root() / BUCKET_NAME


def get_public_base_url() -> str:
    """Return the base URL clients use to reach the API."""
    return os.getenv("RAPORT_PUBLIC_BASE_URL", DEFAULT_PUBLIC_BASE_URL).rstrip("/")


def _normalize_object_path(path: str) -> str:
    normalized = path.replace("\\", "/").lstrip("/")
    parts = [part for part in normalized.split("/") if part]
    if not parts or any(part in {"..", "."} for part in parts) or normalized.endswith("/"):
        raise StorageError(f"Invalid object path: {path!r}")
    return "/".join(parts)


def resolve_object_path(path: str) -> Path:
    """Map an object path to its location on disk.

    Raises:
        StorageError: If *path* is empty, names a directory or escapes the bucket.
    """
    return get_bucket_root().joinpath(*_normalize_object_path(path).split("/"))


def upload_object(path: str, data: bytes, *, upsert: bool = False) -> str:
    """Store *data* at *path* inside the bucket.

    Args:
        path: Object path relative to the bucket root.
        data: Payload to write.
        upsert: Overwrite an existing object instead of failing.

    Returns:
        The normalized object path.

    Raises:
        StorageError: If the object exists and ``upsert`` is False, or the write fails.
    """
    normalized = _normalize_object_path(path)
    target = resolve_object_path(normalized)
    if target.exists() and not upsert:
        raise StorageError(f"Object already exists: {normalized}")

    temp_path: Path | None = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb", dir=target.parent, suffix=".tmp", delete=False
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(data)
        os.replace(temp_path, target)
    except OSError as exc:
        if temp_path is not None:
            with contextlib.suppress(FileNotFoundError):
                temp_path.unlink()
        raise StorageError(f"Failed to store {normalized}: {exc}") from exc
    return normalized


def get_public_url(path: str) -> str:
    """Return the publicly resolvable URL for a stored object path."""
    return f"{get_public_base_url()}/storage/{BUCKET_NAME}/{_normalize_object_path(path)}"
