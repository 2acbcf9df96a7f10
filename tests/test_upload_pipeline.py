from __future__ import annotations

import io
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

import pytest

import raport_santri.services.reports as reports_module
import raport_santri.services.upload as upload_module
from raport_santri.models.errors import RecordStoreError, StorageError
from raport_santri.models.upload import ArchiveBlob
from raport_santri.services import storage
from raport_santri.services.reports import get_all_reports
from raport_santri.services.upload import build_object_path, process_zip_upload

PDF_BYTES = b"%PDF-1.4\n%fake report\n%%EOF\n"


def _create_zip_bytes(entries: list[tuple[str, bytes]]) -> bytes:
    buffer = io.BytesIO()
    with ZipFile(buffer, "w", ZIP_DEFLATED) as archive:
        for name, data in entries:
            archive.writestr(name, data)
    return buffer.getvalue()


def _archive(entries: list[tuple[str, bytes]]) -> ArchiveBlob:
    return ArchiveBlob(
        filename="raport_7a.zip",
        data=_create_zip_bytes(entries),
        content_type="application/zip",
    )


def test_upload_saves_every_pdf(tmp_db: None, tmp_storage: Path) -> None:
    archive = _archive(
        [
            ("7A/ana_putri.pdf", b"%PDF ana"),
            ("7A/budi-santoso.pdf", b"%PDF budi"),
            ("7A/readme.txt", b"ignore me"),
        ]
    )

    outcome = process_zip_upload(archive, "7A")

    assert outcome.success_count == 2
    assert outcome.errors == []
    assert [item.display_name for item in outcome.files] == ["Ana Putri", "Budi Santoso"]

    saved = get_all_reports()
    assert [(r["nama"], r["kelas"]) for r in saved] == [
        ("Ana Putri", "7A"),
        ("Budi Santoso", "7A"),
    ]
    for report in saved:
        assert report["file_pdf"].startswith("http://testserver/storage/raport-files/raports/7A/")

    stored = sorted(path.read_bytes() for path in tmp_storage.rglob("*.pdf"))
    assert stored == [b"%PDF ana", b"%PDF budi"]


def test_persistence_failure_is_isolated(
    tmp_db: None, tmp_storage: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    real_save = reports_module.save_report

    def flaky_save(nama: str, kelas: str, file_url: str):
        if nama == "Second":
            raise RecordStoreError("insert rejected")
        return real_save(nama, kelas, file_url)

    monkeypatch.setattr(reports_module, "save_report", flaky_save)
    archive = _archive(
        [("first.pdf", PDF_BYTES), ("second.pdf", PDF_BYTES), ("third.pdf", PDF_BYTES)]
    )

    outcome = process_zip_upload(archive, "8")

    assert outcome.success_count == 2
    assert outcome.errors == ["Error processing second.pdf: insert rejected"]
    assert [item.ok for item in outcome.files] == [True, False, True]
    assert outcome.files[1].report_id is None
    assert [r["nama"] for r in get_all_reports()] == ["First", "Third"]


def test_storage_failure_is_isolated(
    tmp_db: None, tmp_storage: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    real_upload = storage.upload_object

    def failing_upload(path: str, data: bytes, *, upsert: bool = False) -> str:
        if "Ana" in path:
            raise StorageError("bucket unavailable")
        return real_upload(path, data, upsert=upsert)

    monkeypatch.setattr(storage, "upload_object", failing_upload)
    archive = _archive([("ana.pdf", PDF_BYTES), ("budi.pdf", PDF_BYTES)])

    outcome = process_zip_upload(archive, "9")

    assert outcome.success_count == 1
    assert outcome.errors == ["Error processing ana.pdf: bucket unavailable"]
    assert [r["nama"] for r in get_all_reports()] == ["Budi"]


def test_extraction_failure_is_single_error(tmp_db: None, tmp_storage: Path) -> None:
    archive = _archive([("notes.txt", b"hello")])

    outcome = process_zip_upload(archive, "7A")

    assert outcome.success_count == 0
    assert outcome.files == []
    assert outcome.errors == [
        "Error extracting ZIP file: No PDF files found in ZIP archive. Files found: notes.txt"
    ]
    assert get_all_reports() == []


def test_wrong_container_type_is_reported(tmp_db: None, tmp_storage: Path) -> None:
    archive = ArchiveBlob(filename="raport.pdf", data=PDF_BYTES, content_type="application/pdf")

    outcome = process_zip_upload(archive, "7A")

    assert outcome.success_count == 0
    assert outcome.errors == ["Error extracting ZIP file: File must be a ZIP archive"]


def test_build_object_path_is_namespaced_by_class() -> None:
    path = build_object_path("10A", "Siti Nur Aini", timestamp_ms=1700000000000, token="3f9c2a1b")

    assert path == "raports/10A/1700000000000-3f9c2a1b-Siti_Nur_Aini.pdf"


def test_build_object_path_differs_within_one_millisecond() -> None:
    first = build_object_path("7A", "Ana Putri", timestamp_ms=1700000000000)
    second = build_object_path("7A", "Ana Putri", timestamp_ms=1700000000000)

    assert first != second


def test_names_formatting_alike_are_stored_separately(
    tmp_db: None, tmp_storage: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(upload_module.time, "time_ns", lambda: 1_700_000_000_000_000_000)
    archive = _archive([("ana_putri.pdf", b"%PDF underscore"), ("ana-putri.pdf", b"%PDF dash")])

    outcome = process_zip_upload(archive, "7A")

    assert outcome.errors == []
    assert outcome.success_count == 2
    assert [item.display_name for item in outcome.files] == ["Ana Putri", "Ana Putri"]
    stored = sorted(path.read_bytes() for path in tmp_storage.rglob("*.pdf"))
    assert stored == [b"%PDF dash", b"%PDF underscore"]
