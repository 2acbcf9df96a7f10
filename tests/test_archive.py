from __future__ import annotations

import io
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

import pytest

from raport_santri.models.upload import (
    ArchiveBlob,
    ArchiveEntry,
    ArchiveReadError,
    InvalidArchiveFormat,
    NoQualifyingFilesError,
)
from raport_santri.services.archive import extract_pdf_files, is_qualifying_entry

PDF_BYTES = b"%PDF-1.4\n%fake report\n%%EOF\n"


def _create_zip_bytes(entries: list[tuple[str, bytes]]) -> bytes:
    buffer = io.BytesIO()
    with ZipFile(buffer, "w", ZIP_DEFLATED) as archive:
        for name, data in entries:
            archive.writestr(name, data)
    return buffer.getvalue()


def _blob(
    data: bytes, filename: str = "raport.zip", content_type: str | None = "application/zip"
) -> ArchiveBlob:
    return ArchiveBlob(filename=filename, data=data, content_type=content_type)


def test_extract_skips_non_pdf_entries() -> None:
    data = _create_zip_bytes([("notes.txt", b"hello"), ("Student_A.pdf", PDF_BYTES)])

    files = extract_pdf_files(_blob(data))

    assert len(files) == 1
    assert files[0].name == "Student_A.pdf"
    assert files[0].data == PDF_BYTES
    assert files[0].content_type == "application/pdf"


def test_extract_only_metadata_entries_raises_with_listing() -> None:
    data = _create_zip_bytes([("__MACOSX/._x.pdf", b"meta"), (".hidden.pdf", PDF_BYTES)])

    with pytest.raises(NoQualifyingFilesError) as exc_info:
        extract_pdf_files(_blob(data))

    assert exc_info.value.entries == ["__MACOSX/._x.pdf", ".hidden.pdf"]
    assert str(exc_info.value) == (
        "No PDF files found in ZIP archive. Files found: __MACOSX/._x.pdf, .hidden.pdf"
    )


def test_extract_discards_directories_and_keeps_leaf_names() -> None:
    data = _create_zip_bytes(
        [
            ("kelas_7a/", b""),
            ("kelas_7a/ana_putri.pdf", PDF_BYTES),
            ("kelas_7a/sub/BUDI.PDF", PDF_BYTES),
            ("kelas_7a/.DS_Store", b""),
            ("kelas_7a/sub/.secret.pdf", PDF_BYTES),
        ]
    )

    files = extract_pdf_files(_blob(data))

    assert [pdf.name for pdf in files] == ["ana_putri.pdf", "BUDI.PDF"]


def test_extract_same_leaf_name_in_different_folders_collapses() -> None:
    data = _create_zip_bytes([("a/siti.pdf", b"%PDF first"), ("b/siti.pdf", b"%PDF second")])

    files = extract_pdf_files(_blob(data))

    assert len(files) == 1
    assert files[0].name == "siti.pdf"
    assert files[0].data == b"%PDF second"


def test_extract_error_message_lists_only_files() -> None:
    data = _create_zip_bytes([("docs/", b""), ("docs/readme.md", b"# hi"), ("photo.png", b"png")])

    with pytest.raises(NoQualifyingFilesError) as exc_info:
        extract_pdf_files(_blob(data))

    assert exc_info.value.entries == ["docs/readme.md", "photo.png"]


@pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", "image/png"])
def test_extract_rejects_non_zip_content_type(content_type: str) -> None:
    data = _create_zip_bytes([("a.pdf", PDF_BYTES)])

    with pytest.raises(InvalidArchiveFormat):
        extract_pdf_files(_blob(data, content_type=content_type))


def test_extract_accepts_zip_compressed_content_type() -> None:
    data = _create_zip_bytes([("a.pdf", PDF_BYTES)])

    files = extract_pdf_files(_blob(data, content_type="application/x-zip-compressed"))

    assert [pdf.name for pdf in files] == ["a.pdf"]


def test_extract_generic_content_type_falls_back_to_suffix() -> None:
    data = _create_zip_bytes([("a.pdf", PDF_BYTES)])

    assert extract_pdf_files(_blob(data, "batch.ZIP", "application/octet-stream"))
    assert extract_pdf_files(_blob(data, "batch.zip", None))
    with pytest.raises(InvalidArchiveFormat):
        extract_pdf_files(_blob(data, "batch.rar", "application/octet-stream"))


def test_extract_corrupt_archive_raises_read_error() -> None:
    with pytest.raises(ArchiveReadError) as exc_info:
        extract_pdf_files(_blob(b"not a real zip"))

    assert exc_info.value.__cause__ is not None


def test_extract_corrupt_member_raises_read_error() -> None:
    buffer = io.BytesIO()
    with ZipFile(buffer, "w", ZIP_STORED) as archive:
        archive.writestr("notes.txt", b"hello")
        archive.writestr("Student_A.pdf", PDF_BYTES)
    corrupted = bytearray(buffer.getvalue())
    payload_offset = corrupted.find(PDF_BYTES)
    corrupted[payload_offset + 5] ^= 0xFF

    with pytest.raises(ArchiveReadError) as exc_info:
        extract_pdf_files(_blob(bytes(corrupted)))

    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize(
    ("raw_path", "is_directory", "expected"),
    [
        ("Student_A.pdf", False, True),
        ("nested/dir/Student_A.Pdf", False, True),
        ("reports.pdf/", True, False),
        ("__MACOSX/Student_A.pdf", False, False),
        ("x/__macosx/y.pdf", False, False),
        ("x/.hidden.pdf", False, False),
        (".config/real.pdf", False, True),
        ("Student_A.pdf.txt", False, False),
    ],
)
def test_is_qualifying_entry(raw_path: str, is_directory: bool, expected: bool) -> None:
    entry = ArchiveEntry(raw_path=raw_path, is_directory=is_directory)
    assert is_qualifying_entry(entry) is expected
