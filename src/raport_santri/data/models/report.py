"""ORM model for stored report cards.

A report row is created by the upload pipeline once its PDF has been stored
and is never updated afterwards; staff may delete rows individually or in bulk.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from raport_santri.data.db import Base


class Report(Base):
    """A student's report-card PDF.

    Attributes:
        id: Opaque UUID primary key.
        nama: Student display name.
        kelas: Class identifier the report was uploaded for.
        file_pdf: Public URL of the stored PDF.
        created_at: UTC timestamp of when the report was saved.
    """

    __tablename__ = "report"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    nama: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    kelas: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    file_pdf: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
