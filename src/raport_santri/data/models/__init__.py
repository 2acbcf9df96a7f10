"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Report: One stored report-card PDF for a student in a class
- Tunggakan: An outstanding-fee entry that hides matching reports from search
- User: Staff account allowed to upload and manage records

All models inherit from the shared Base declarative class defined in data.db.
"""

from raport_santri.data.db import Base
from raport_santri.data.models.report import Report
from raport_santri.data.models.tunggakan import Tunggakan
from raport_santri.data.models.user import User

__all__ = ["Base", "Report", "Tunggakan", "User"]
