"""AmmoScout - Streamlit storefront."""

import asyncio
import datetime
import streamlit as st
from config.settings import Settings
from engine.reducer import reduce
from export.csv_export import export_csv
from retrieval.catalog_loader import CatalogLoader, create_provider
from schemas.query import ANY, QueryAction, QueryEvent, QuerySpec, SortKey, SORT_LABELS
from storefront.affiliate import build_affiliate_link
from storefront.view import build_view, format_price, format_qty

settings = Settings()

st.set_page_config(
    page_title=settings.site_name,
    page_icon="🎯",
    layout="wide"
)

# Initialize session state
if "spec" not in st.session_state:
    st.session_state.spec = QuerySpec(page_size=settings.page_size)

if "loader" not in st.session_state:
    provider = create_provider(settings)
    st.session_state.loader = CatalogLoader(provider, delay_seconds=settings.load_delay_seconds)
    st.session_state.sponsors = provider.fetch_sponsors()


def dispatch(action: QueryAction, value=None):
    """Apply an interaction to the query state."""
    view = build_view(st.session_state.loader.state, st.session_state.spec)
    st.session_state.spec = reduce(
        st.session_state.spec,
        QueryEvent(action=action, value=value),
        total_pages=view.total_pages,
    )


def on_search():
    dispatch(QueryAction.SET_TERM, st.session_state.search_term)


def on_caliber():
    dispatch(QueryAction.SET_CALIBER, st.session_state.caliber_filter)


def on_brand():
    dispatch(QueryAction.SET_BRAND, st.session_state.brand_filter)


def on_sort():
    dispatch(QueryAction.SET_SORT, st.session_state.sort_key)


def on_reset():
    """Reset filters and sync the widgets with the fresh state."""
    dispatch(QueryAction.RESET)
    st.session_state.search_term = ""
    st.session_state.caliber_filter = ANY
    st.session_state.brand_filter = ANY
    st.session_state.sort_key = SortKey.RELEVANCE.value


# Header
col_title, col_search = st.columns([1, 1])
with col_title:
    st.title(settings.site_name)
    st.caption(settings.tagline)

with col_search:
    with st.form("search", border=False):
        st.text_input(
            "Search ammo",
            key="search_term",
            placeholder="Search by caliber, brand, or model (e.g. '9mm Federal')"
        )
        st.form_submit_button("Search", on_click=on_search)
    st.caption("Tip: Use filters below for faster results")

sponsor_cols = st.columns([1, 3])
with sponsor_cols[0]:
    for sponsor in st.session_state.sponsors:
        st.markdown(f"[![{sponsor.name} sponsor]({sponsor.img})]({sponsor.url})")
with sponsor_cols[1]:
    st.caption("Sponsored listings may contain affiliate links.")

# One-shot catalog load
loader = st.session_state.loader
if not loader.state.is_settled:
    with st.spinner("Loading..."):
        asyncio.run(loader.load())

view = build_view(loader.state, st.session_state.spec)

# Sidebar filters
st.sidebar.header("Filters")
st.sidebar.selectbox("Caliber", options=view.calibers, key="caliber_filter", on_change=on_caliber)
st.sidebar.selectbox("Brand", options=view.brands, key="brand_filter", on_change=on_brand)
st.sidebar.selectbox(
    "Sort",
    options=[key.value for key in SortKey],
    format_func=lambda value: SORT_LABELS[SortKey(value)],
    key="sort_key",
    on_change=on_sort
)
st.sidebar.markdown("---")
st.sidebar.caption(
    "Built for publishers: include your sponsor image/banner here and "
    "affiliate redirect links for each vendor."
)

# Results toolbar
col_status, col_reset, col_export = st.columns([4, 1, 1])
with col_status:
    if view.error:
        st.error(view.status_text)
    else:
        st.markdown(view.status_text)

with col_reset:
    st.button("Reset", on_click=on_reset)

with col_export:
    if view.results:
        export = export_csv(view.results, filename=settings.export_filename)
        st.download_button(
            "Export CSV",
            data=export.data,
            file_name=export.filename,
            mime=export.mime_type,
        )
    elif st.button("Export CSV"):
        export_csv(view.results, notify=st.warning)

# Product cards
cards = st.columns(3)
for index, product in enumerate(view.visible):
    with cards[index % 3]:
        with st.container(border=True):
            if product.image:
                st.image(product.image)
            st.markdown(f"**{product.title}**")
            st.caption(f"{product.brand} • {product.caliber}")
            st.markdown(f"### {format_price(product.price)} {format_qty(product.qty)}")
            buy, vendor = st.columns([2, 1])
            with buy:
                st.link_button(
                    "Buy (Affiliate)",
                    build_affiliate_link(product.link, base=settings.affiliate_base),
                    type="primary"
                )
            with vendor:
                st.link_button("View", product.link)
            st.caption(product.stock)

# Pager
col_prev, col_page, col_next = st.columns([1, 2, 1])
with col_prev:
    st.button("Prev", on_click=dispatch, args=(QueryAction.PREV_PAGE,), disabled=not view.has_prev)
with col_page:
    st.markdown(f"Page {view.page} / {view.total_pages}")
with col_next:
    st.button("Next", on_click=dispatch, args=(QueryAction.NEXT_PAGE,), disabled=not view.has_next)

# Footer
st.markdown("---")
st.caption(f"© {datetime.date.today().year} {settings.site_name} — Sponsors & affiliates supported.")
