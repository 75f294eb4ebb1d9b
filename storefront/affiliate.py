"""Affiliate redirect links."""

from urllib.parse import quote

AFFILIATE_BASE = "https://example-affiliate.com/redirect?url="

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_affiliate_link(dest_url: str, base: str = AFFILIATE_BASE) -> str:
    """Route a vendor URL through the affiliate redirect service."""
    return f"{base}{quote(dest_url, safe=_URI_COMPONENT_SAFE)}"
