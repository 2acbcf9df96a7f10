"""Helpers that turn archive filenames into student display names."""

from __future__ import annotations

import re

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR_RUN_RE = re.compile(r"[_-]+")
_WORD_START_RE = re.compile(r"(^|\s)(\S)")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_UNSAFE_SLUG_CHARS_RE = re.compile(r"[^\w.-]")


def format_student_name(filename: str) -> str:
    """Derive a display name from a report filename.

    ``"budi_santoso-7a.pdf"`` becomes ``"Budi Santoso 7a"``. Only the first
    character of each word is touched; the rest keep their original case.

    Args:
        filename: Leaf filename including its extension.

    Returns:
        The formatted name, possibly empty.
    """
    stem = _EXTENSION_RE.sub("", filename)
    spaced = _SEPARATOR_RUN_RE.sub(" ", stem).strip()
    return _WORD_START_RE.sub(lambda match: match.group(1) + match.group(2).upper(), spaced)


def storage_slug(display_name: str) -> str:
    """Return a path-safe slug for *display_name* (``"Ana Putri"`` -> ``"Ana_Putri"``)."""
    collapsed = _WHITESPACE_RUN_RE.sub("_", display_name.strip())
    return _UNSAFE_SLUG_CHARS_RE.sub("", collapsed) or "raport"
