"""Catalog query engine: search, filter, sort and paginate in memory."""

import math
from typing import Sequence
from schemas.product import Product
from schemas.query import ANY, QuerySpec, SortKey


class CatalogQueryEngine:
    """
    Pure query pipeline over an in-memory product collection.

    Nothing here mutates its input; every call returns a fresh list.
    """

    def query(self, products: Sequence[Product], spec: QuerySpec) -> list[Product]:
        """
        Filter and sort products for a query.

        Args:
            products: Full product collection, in catalog order
            spec: Current query state

        Returns:
            Matching products in display order
        """
        results = list(products)

        term = spec.term.strip().lower()
        if term:
            results = [
                p for p in results
                if term in f"{p.title} {p.brand}".lower()
            ]

        if spec.caliber_filter != ANY:
            results = [p for p in results if p.caliber == spec.caliber_filter]

        if spec.brand_filter != ANY:
            results = [p for p in results if p.brand == spec.brand_filter]

        return self.sort(results, spec.sort_key)

    def sort(self, products: Sequence[Product], sort_key: SortKey) -> list[Product]:
        """Stable sort; ties keep their prior relative order."""
        sort_key = SortKey(sort_key)
        if sort_key == SortKey.PRICE_ASC:
            return sorted(products, key=lambda p: p.price)
        if sort_key == SortKey.PRICE_DESC:
            # reverse=True would flip ties, so negate the key instead
            return sorted(products, key=lambda p: -p.price)
        if sort_key == SortKey.QTY_DESC:
            return sorted(products, key=lambda p: -p.qty)
        return list(products)

    @staticmethod
    def total_pages(match_count: int, page_size: int) -> int:
        """Number of pages, never less than one."""
        return max(1, math.ceil(match_count / page_size))

    @staticmethod
    def clamp_page(page: int, total_pages: int) -> int:
        """Clamp a page number to [1, total_pages]."""
        return max(1, min(page, total_pages))

    @staticmethod
    def paginate(results: Sequence[Product], page: int, page_size: int) -> list[Product]:
        """Return the 1-indexed page slice of results."""
        start = max(0, (page - 1) * page_size)
        return list(results[start:start + page_size])

    def distinct_calibers(self, products: Sequence[Product]) -> list[str]:
        """Caliber filter options, "Any" first then first-seen order."""
        return self._distinct(p.caliber for p in products)

    def distinct_brands(self, products: Sequence[Product]) -> list[str]:
        """Brand filter options, "Any" first then first-seen order."""
        return self._distinct(p.brand for p in products)

    @staticmethod
    def _distinct(values) -> list[str]:
        # dict preserves insertion order
        return [ANY, *dict.fromkeys(values)]
