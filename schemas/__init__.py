"""Pydantic schemas for the AmmoScout storefront."""

from .product import Product, Sponsor
from .query import ANY, SortKey, SORT_LABELS, QuerySpec, QueryAction, QueryEvent
from .loading import LoadStatus, CatalogLoadState

__all__ = [
    "Product",
    "Sponsor",
    "ANY",
    "SortKey",
    "SORT_LABELS",
    "QuerySpec",
    "QueryAction",
    "QueryEvent",
    "LoadStatus",
    "CatalogLoadState",
]
