"""Tests for CSV export."""

from export.csv_export import (
    CSV_HEADER,
    CSV_MIME_TYPE,
    NO_DATA_NOTICE,
    build_csv,
    escape_csv,
    export_csv,
)
from retrieval.catalog_provider import SampleCatalogProvider
from schemas.product import Product


class TestEscapeCsv:
    """Test field escaping."""

    def test_plain_string_unchanged(self):
        """Test strings without special characters pass through."""
        assert escape_csv("Federal") == "Federal"
        assert escape_csv("") == ""

    def test_comma_quoted(self):
        """Test a comma forces quoting."""
        assert escape_csv("9mm, 115gr") == '"9mm, 115gr"'

    def test_quote_doubled(self):
        """Test internal quotes are doubled inside the wrapping quotes."""
        assert escape_csv('2-3/4" 1oz') == '"2-3/4"" 1oz"'

    def test_newline_quoted(self):
        """Test a newline forces quoting."""
        assert escape_csv("line one\nline two") == '"line one\nline two"'

    def test_non_string_unchanged(self):
        """Test numbers are returned as-is."""
        assert escape_csv(24.99) == 24.99
        assert escape_csv(50) == 50


class TestExportCsv:
    """Test the full export."""

    def setup_method(self):
        """Set up test fixtures."""
        self.products = SampleCatalogProvider().fetch_products()
        self.notices = []

    def test_sample_export(self):
        """Test header and rows for the sample catalog."""
        export = export_csv(self.products)

        assert export is not None
        assert export.filename == "ammoscout_export.csv"
        assert export.mime_type == CSV_MIME_TYPE
        assert export.content.split("\n") == [
            "title,brand,caliber,price,qty,link",
            "Federal Premium 9mm Luger 115gr FMJ,Federal,9mm,24.99,50,https://vendor.example/product/p1",
            "Winchester .223 Rem 55gr FMJ,Winchester,.223 Rem,28.5,20,https://vendor.example/product/p2",
            '"Remington 12ga 2-3/4"" 1oz",Remington,12ga,15,200,https://vendor.example/product/p3',
        ]

    def test_empty_export_notifies(self):
        """Test an empty export shows the notice and produces no file."""
        result = export_csv([], notify=self.notices.append)

        assert result is None
        assert self.notices == [NO_DATA_NOTICE]

    def test_empty_export_without_callback(self):
        """Test an empty export without a callback does not raise."""
        assert export_csv([]) is None

    def test_custom_filename(self):
        """Test the download name can be overridden."""
        export = export_csv(self.products[:1], filename="cheap_9mm.csv")
        assert export.filename == "cheap_9mm.csv"

    def test_one_row_per_item(self):
        """Test one row per item plus the header."""
        content = build_csv(self.products[:2])
        lines = content.split("\n")
        assert lines[0] == CSV_HEADER
        assert len(lines) == 3

    def test_data_is_utf8(self):
        """Test download bytes are UTF-8 encoded."""
        product = Product(
            id="x1",
            title="Sellier & Bellot 7.62×39",
            brand="Sellier & Bellot",
            caliber="7.62×39",
            price=9.0,
            qty=20,
            link="https://vendor.example/product/x1",
        )
        export = export_csv([product])
        assert export.data == export.content.encode("utf-8")
        assert "7.62×39,9,20," in export.content
