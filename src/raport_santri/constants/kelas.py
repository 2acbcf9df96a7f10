"""Class ("kelas") catalogue offered to staff when uploading and filtering."""

from __future__ import annotations

KELAS_OPTIONS: tuple[str, ...] = ("7A", "7B", "8", "9", "10A", "10B", "11", "12")
