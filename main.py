#!/usr/bin/env python3
"""AmmoScout CLI."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from config.settings import Settings
from engine.query_engine import CatalogQueryEngine
from export.csv_export import export_csv
from retrieval.catalog_loader import CatalogLoader, create_provider
from schemas.loading import LoadStatus
from schemas.query import ANY, QuerySpec, SortKey
from storefront.affiliate import build_affiliate_link
from storefront.view import build_view, format_price, format_qty


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Command line options."""
    parser = argparse.ArgumentParser(
        description="AmmoScout - search and compare ammo prices"
    )
    parser.add_argument(
        "--search",
        "-s",
        type=str,
        default="",
        help="Free-text search over title and brand"
    )
    parser.add_argument(
        "--caliber",
        type=str,
        default=ANY,
        help="Exact caliber filter (default: Any)"
    )
    parser.add_argument(
        "--brand",
        type=str,
        default=ANY,
        help="Exact brand filter (default: Any)"
    )
    parser.add_argument(
        "--sort",
        type=str,
        choices=[key.value for key in SortKey],
        default=SortKey.RELEVANCE.value,
        help="Result ordering (default: relevance)"
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number, 1-indexed (default: 1)"
    )
    parser.add_argument(
        "--page-size",
        type=positive_int,
        help="Results per page (default: from settings)"
    )
    parser.add_argument(
        "--csv-path",
        type=str,
        help="Path to a catalog CSV file (uses sample data if omitted)"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="Base URL of a catalog API"
    )
    parser.add_argument(
        "--export",
        "-e",
        type=str,
        help="Write all matching results to this CSV file instead of printing"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    # Create settings
    settings = Settings(
        catalog_path=args.csv_path,
        catalog_api_url=args.api_url,
        load_delay_ms=0,
        verbose=args.verbose,
    )

    spec = QuerySpec(
        term=args.search,
        caliber_filter=args.caliber,
        brand_filter=args.brand,
        sort_key=SortKey(args.sort),
        page=max(1, args.page),
        page_size=args.page_size if args.page_size is not None else settings.page_size,
    )

    try:
        loader = CatalogLoader(create_provider(settings))
        state = asyncio.run(loader.load())
    except Exception as e:
        print(f"Error loading catalog: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    if state.status == LoadStatus.FAILED:
        print(f"Error loading catalog: {state.error}", file=sys.stderr)
        sys.exit(1)

    view = build_view(state, spec, CatalogQueryEngine())

    if args.export:
        export = export_csv(
            view.results,
            notify=lambda notice: print(notice, file=sys.stderr),
            filename=Path(args.export).name
        )
        if export is not None:
            Path(args.export).write_text(export.content, encoding="utf-8")
            print(f"Exported {view.match_count} results to {args.export}")
        return

    print("\n" + "="*60)
    print(f"{settings.site_name.upper()} - {view.status_text}")
    print("="*60 + "\n")

    for product in view.visible:
        print(f"{product.title}")
        print(f"  {product.brand} • {product.caliber}")
        print(f"  {format_price(product.price)} {format_qty(product.qty)} - {product.stock}")
        print(f"  Buy: {build_affiliate_link(product.link, base=settings.affiliate_base)}")
        print()

    print(f"Page {view.page} / {view.total_pages}")


if __name__ == "__main__":
    main()
