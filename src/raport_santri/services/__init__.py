"""Services"""

from raport_santri.services.availability import filter_available, get_available_reports
from raport_santri.services.search import SearchResult, search_reports
from raport_santri.services.upload import process_zip_upload

__all__ = [
    "filter_available",
    "get_available_reports",
    "process_zip_upload",
    "search_reports",
    "SearchResult",
]
