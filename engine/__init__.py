"""Catalog query pipeline."""

from .query_engine import CatalogQueryEngine
from .reducer import reduce

__all__ = ["CatalogQueryEngine", "reduce"]
