"""State transitions for QuerySpec.

Each interaction produces a new QuerySpec. Changing the search term or a
filter goes back to page 1; changing the sort key keeps the current page.
"""

from schemas.query import ANY, QueryAction, QueryEvent, QuerySpec, SortKey


def reduce(spec: QuerySpec, event: QueryEvent, total_pages: int = 1) -> QuerySpec:
    """
    Apply one interaction to a query state.

    Args:
        spec: Current state
        event: Interaction to apply
        total_pages: Page count of the current result set (for paging)

    Returns:
        New state; ``spec`` is left untouched
    """
    action = event.action

    if action == QueryAction.SET_TERM:
        return spec.model_copy(update={"term": str(event.value or ""), "page": 1})

    if action == QueryAction.SUBMIT_SEARCH:
        return spec.model_copy(update={"page": 1})

    if action == QueryAction.SET_CALIBER:
        return spec.model_copy(update={"caliber_filter": event.value or ANY, "page": 1})

    if action == QueryAction.SET_BRAND:
        return spec.model_copy(update={"brand_filter": event.value or ANY, "page": 1})

    if action == QueryAction.SET_SORT:
        return spec.model_copy(update={"sort_key": SortKey(event.value)})

    if action == QueryAction.NEXT_PAGE:
        return spec.model_copy(update={"page": min(total_pages, spec.page + 1)})

    if action == QueryAction.PREV_PAGE:
        return spec.model_copy(update={"page": max(1, spec.page - 1)})

    if action == QueryAction.GO_TO_PAGE:
        if event.value is None:
            raise ValueError("go_to_page requires a page number")
        page = max(1, min(int(event.value), total_pages))
        return spec.model_copy(update={"page": page})

    if action == QueryAction.RESET:
        return QuerySpec(page_size=spec.page_size)

    raise ValueError(f"Unsupported query action: {action}")
