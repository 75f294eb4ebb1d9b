"""Query state schemas."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

ANY = "Any"


class SortKey(str, Enum):
    """Result ordering."""
    RELEVANCE = "relevance"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    QTY_DESC = "qty-desc"


SORT_LABELS = {
    SortKey.RELEVANCE: "Relevance",
    SortKey.PRICE_ASC: "Price: Low → High",
    SortKey.PRICE_DESC: "Price: High → Low",
    SortKey.QTY_DESC: "Quantity: High → Low",
}


class QuerySpec(BaseModel):
    """Current search, filter, sort and page state."""
    model_config = ConfigDict(frozen=True)

    term: str = ""
    caliber_filter: str = ANY
    brand_filter: str = ANY
    sort_key: SortKey = SortKey.RELEVANCE
    page: int = Field(1, ge=1)
    page_size: int = Field(6, ge=1)


class QueryAction(str, Enum):
    """User interactions that update a QuerySpec."""
    SET_TERM = "set_term"
    SUBMIT_SEARCH = "submit_search"
    SET_CALIBER = "set_caliber"
    SET_BRAND = "set_brand"
    SET_SORT = "set_sort"
    NEXT_PAGE = "next_page"
    PREV_PAGE = "prev_page"
    GO_TO_PAGE = "go_to_page"
    RESET = "reset"


class QueryEvent(BaseModel):
    """A single interaction with its payload."""
    action: QueryAction
    value: Optional[Any] = None
