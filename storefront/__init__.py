"""Storefront presentation helpers."""

from .affiliate import AFFILIATE_BASE, build_affiliate_link
from .view import CatalogView, build_view, format_price, format_qty

__all__ = [
    "AFFILIATE_BASE",
    "build_affiliate_link",
    "CatalogView",
    "build_view",
    "format_price",
    "format_qty",
]
