from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import raport_santri.data.db as app_db
from raport_santri.data.db import init_db
from raport_santri.data.models import Base


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point the session factory at a temporary SQLite database."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(app_db, "_engine", engine)
    monkeypatch.setattr(
        app_db,
        "_SessionLocal",
        sessionmaker(bind=engine, autoflush=False, expire_on_commit=False),
    )
    yield
    engine.dispose()


@pytest.fixture
def tmp_storage(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Use a temporary directory as the object storage root."""
    storage_root = tmp_path / "storage"
    monkeypatch.setenv("RAPORT_STORAGE_DIR", storage_root.as_posix())
    monkeypatch.setenv("RAPORT_PUBLIC_BASE_URL", "http://testserver")
    return storage_root


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, tmp_storage: Path) -> Iterator[None]:
    """Use a temporary SQLite DB and storage root for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    if app_db._engine is not None:
        app_db._engine.dispose()
        app_db._engine = None
        app_db._SessionLocal = None


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    for item in items:
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("api_db"))
