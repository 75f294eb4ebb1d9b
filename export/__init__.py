"""CSV export of catalog results."""

from .csv_export import (
    CSV_HEADER,
    CSV_MIME_TYPE,
    NO_DATA_NOTICE,
    CsvExport,
    build_csv,
    escape_csv,
    export_csv,
)

__all__ = [
    "CSV_HEADER",
    "CSV_MIME_TYPE",
    "NO_DATA_NOTICE",
    "CsvExport",
    "build_csv",
    "escape_csv",
    "export_csv",
]
