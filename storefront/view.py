"""Page model for the storefront listing."""

from typing import Optional, Sequence
from pydantic import BaseModel, Field
from engine.query_engine import CatalogQueryEngine
from schemas.loading import CatalogLoadState, LoadStatus
from schemas.product import Product
from schemas.query import QuerySpec


class CatalogView(BaseModel):
    """Everything the listing needs to render one interaction."""
    results: list[Product] = Field(default_factory=list, description="All matches, sorted")
    visible: list[Product] = Field(default_factory=list, description="Current page slice")
    page: int = 1
    total_pages: int = 1
    match_count: int = 0
    calibers: list[str] = Field(default_factory=list)
    brands: list[str] = Field(default_factory=list)
    status_text: str = ""
    loading: bool = False
    error: Optional[str] = None

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def build_view(
    load_state: CatalogLoadState,
    spec: QuerySpec,
    engine: Optional[CatalogQueryEngine] = None
) -> CatalogView:
    """
    Run the query pipeline for the current state.

    Args:
        load_state: Catalog load state; products are empty until LOADED
        spec: Current query state
        engine: Query engine (a default one is created if omitted)

    Returns:
        CatalogView with the clamped page and facet options
    """
    engine = engine or CatalogQueryEngine()
    products: Sequence[Product] = load_state.products

    results = engine.query(products, spec)
    total_pages = engine.total_pages(len(results), spec.page_size)
    page = engine.clamp_page(spec.page, total_pages)

    loading = load_state.status in (LoadStatus.NOT_STARTED, LoadStatus.LOADING)
    if loading:
        status_text = "Loading..."
    elif load_state.status == LoadStatus.FAILED:
        status_text = f"Failed to load catalog: {load_state.error}"
    else:
        status_text = f"{len(results)} results"

    return CatalogView(
        results=results,
        visible=engine.paginate(results, page, spec.page_size),
        page=page,
        total_pages=total_pages,
        match_count=len(results),
        calibers=engine.distinct_calibers(products),
        brands=engine.distinct_brands(products),
        status_text=status_text,
        loading=loading,
        error=load_state.error,
    )


def format_price(price: float) -> str:
    """Display price with two decimals, e.g. $24.99."""
    return f"${price:.2f}"


def format_qty(qty: int) -> str:
    """Display round count, e.g. (50 rounds)."""
    return f"({qty} rounds)"
