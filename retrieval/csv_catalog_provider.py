"""CSV catalog provider with parsing and cleaning logic."""

import logging
import pandas as pd
import yaml
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from retrieval.catalog_provider import CatalogProvider, CatalogLoadError
from schemas.product import Product

logger = logging.getLogger(__name__)


class CSVCatalogProvider(CatalogProvider):
    """Load products from a CSV export of a vendor catalog."""

    name = "csv"

    REQUIRED_FIELDS = ["id", "title", "brand", "caliber", "price", "qty", "link"]
    OPTIONAL_FIELDS = ["stock", "image"]

    def __init__(self, csv_path: str, columns_config_path: Optional[str] = None):
        """
        Initialize CSV catalog provider.

        Args:
            csv_path: Path to CSV file
            columns_config_path: Path to columns.yaml config
        """
        self.csv_path = csv_path

        if columns_config_path is None:
            # Default to config/columns.yaml
            base_path = Path(__file__).parent.parent
            columns_config_path = base_path / "config" / "columns.yaml"

        with open(columns_config_path, 'r') as f:
            self.column_mapping = yaml.safe_load(f)

    def load_csv(self) -> pd.DataFrame:
        """
        Load CSV file with proper cleaning.

        Returns:
            Cleaned DataFrame with columns renamed to product fields

        Raises:
            CatalogLoadError: If the file is missing or no encoding/delimiter
                combination yields the required columns
        """
        if not Path(self.csv_path).exists():
            raise CatalogLoadError(f"Catalog file not found: {self.csv_path}")

        # Try different encodings and delimiters
        encodings = ['utf-8-sig', 'utf-16', 'latin-1']
        delimiters = [',', '\t', ';']

        for encoding in encodings:
            for delimiter in delimiters:
                try:
                    df = pd.read_csv(
                        self.csv_path,
                        encoding=encoding,
                        delimiter=delimiter,
                        dtype=str,
                        keep_default_na=False,
                    )
                except (UnicodeDecodeError, UnicodeError, pd.errors.ParserError, pd.errors.EmptyDataError):
                    continue

                columns = self._resolve_columns(df)
                if all(field in columns for field in self.REQUIRED_FIELDS):
                    logger.debug(f"Read {self.csv_path} as {encoding} with {delimiter!r} delimiter")
                    df = df[list(columns.values())].rename(
                        columns={col: field for field, col in columns.items()}
                    )
                    return self._clean_dataframe(df)

        raise CatalogLoadError(
            f"Could not read catalog columns {self.REQUIRED_FIELDS} from {self.csv_path}"
        )

    def _resolve_columns(self, df: pd.DataFrame) -> dict[str, str]:
        """Map product fields to the first matching CSV header."""
        headers = [str(c).strip() for c in df.columns]
        df.columns = headers

        columns = {}
        for field in self.REQUIRED_FIELDS + self.OPTIONAL_FIELDS:
            candidates = self.column_mapping.get("product", {}).get(field, [field])
            if isinstance(candidates, str):
                candidates = [candidates]
            for candidate in candidates:
                if candidate in headers:
                    columns[field] = candidate
                    break
        return columns

    def _clean_dataframe(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean DataFrame with normalization rules.

        Args:
            df: Raw DataFrame with product field columns

        Returns:
            Cleaned DataFrame
        """
        # Make a copy to avoid modifying original
        df = df.copy()

        for column in df.columns:
            df[column] = df[column].str.strip()

        # Drop fully blank rows (trailing lines in spreadsheet exports)
        df = df[(df != "").any(axis=1)].copy()

        # Clean numeric fields ("$24.99", "1,000")
        for field in ["price", "qty"]:
            cleaned = df[field].str.replace(r"[$,]", "", regex=True)
            df[field] = pd.to_numeric(cleaned, errors='coerce')

        return df

    def fetch_products(self) -> list[Product]:
        """
        Load and validate every CSV row as a Product.

        Raises:
            CatalogLoadError: On unreadable files or invalid rows
        """
        df = self.load_csv()

        products = []
        for row_number, record in enumerate(df.to_dict(orient="records"), start=2):
            if pd.isna(record["price"]) or pd.isna(record["qty"]):
                raise CatalogLoadError(f"Row {row_number}: price and qty must be numeric")

            # Missing optional columns fall back to model defaults
            data = {k: v for k, v in record.items() if not (k in self.OPTIONAL_FIELDS and v == "")}
            try:
                products.append(Product.model_validate(data))
            except ValidationError as e:
                raise CatalogLoadError(f"Row {row_number}: invalid product: {e}") from e

        logger.info(f"Loaded {len(products)} products from {self.csv_path}")
        return products
