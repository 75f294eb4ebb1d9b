"""Retrieval layer for catalog sources."""

from .catalog_provider import CatalogProvider, CatalogLoadError, SampleCatalogProvider
from .csv_catalog_provider import CSVCatalogProvider
from .catalog_api_provider import CatalogAPIProvider
from .catalog_loader import CatalogLoader, create_provider, validate_catalog

__all__ = [
    "CatalogProvider",
    "CatalogLoadError",
    "SampleCatalogProvider",
    "CSVCatalogProvider",
    "CatalogAPIProvider",
    "CatalogLoader",
    "create_provider",
    "validate_catalog",
]
