"""CSV export formatter."""

import logging
from typing import Callable, Optional, Sequence
from pydantic import BaseModel
from schemas.product import Product

logger = logging.getLogger(__name__)

CSV_HEADER = "title,brand,caliber,price,qty,link"
CSV_MIME_TYPE = "text/csv; charset=utf-8"
DEFAULT_FILENAME = "ammoscout_export.csv"
NO_DATA_NOTICE = "No data to export"


class CsvExport(BaseModel):
    """A downloadable CSV artifact."""
    filename: str = DEFAULT_FILENAME
    mime_type: str = CSV_MIME_TYPE
    content: str

    @property
    def data(self) -> bytes:
        """Encoded content for download surfaces."""
        return self.content.encode("utf-8")


def escape_csv(value):
    """
    Quote a string field if it contains a comma, quote or newline.

    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def _format_number(value) -> str:
    """Shortest form: 15.0 -> 15, 28.5 -> 28.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_csv(items: Sequence[Product]) -> str:
    """Header row followed by one row per item, newline separated."""
    rows = [CSV_HEADER]
    for item in items:
        rows.append(",".join([
            escape_csv(item.title),
            escape_csv(item.brand),
            escape_csv(item.caliber),
            _format_number(item.price),
            _format_number(item.qty),
            escape_csv(item.link),
        ]))
    return "\n".join(rows)


def export_csv(
    items: Sequence[Product],
    notify: Optional[Callable[[str], None]] = None,
    filename: str = DEFAULT_FILENAME
) -> Optional[CsvExport]:
    """
    Build the CSV export for a result set.

    Args:
        items: Products to export (the filtered, sorted results)
        notify: Callback that shows a notice to the user
        filename: Name of the downloaded file

    Returns:
        CsvExport, or None if there was nothing to export
    """
    if not items:
        logger.warning(NO_DATA_NOTICE)
        if notify is not None:
            notify(NO_DATA_NOTICE)
        return None

    return CsvExport(filename=filename, content=build_csv(items))
