"""Tests for affiliate link building."""

from storefront.affiliate import AFFILIATE_BASE, build_affiliate_link


class TestAffiliateLink:
    """Test affiliate redirect URLs."""

    def test_vendor_url_encoded(self):
        """Test the destination is fully percent-encoded after the base."""
        link = build_affiliate_link("https://vendor.example/product/p1")
        assert link == "https://example-affiliate.com/redirect?url=https%3A%2F%2Fvendor.example%2Fproduct%2Fp1"

    def test_query_string_encoded(self):
        """Test query separators in the destination are encoded."""
        link = build_affiliate_link("https://vendor.example/p?id=1&ref=a b")
        assert link == AFFILIATE_BASE + "https%3A%2F%2Fvendor.example%2Fp%3Fid%3D1%26ref%3Da%20b"

    def test_unreserved_characters_kept(self):
        """Test characters encodeURIComponent leaves alone are kept."""
        assert build_affiliate_link("a-b_c.d!e~f*g'h(i)") == AFFILIATE_BASE + "a-b_c.d!e~f*g'h(i)"

    def test_custom_base(self):
        """Test a configured base replaces the default."""
        link = build_affiliate_link("x/y", base="https://aff.example/r?url=")
        assert link == "https://aff.example/r?url=x%2Fy"

    def test_empty_destination(self):
        """Test an empty destination yields the bare base."""
        assert build_affiliate_link("") == AFFILIATE_BASE
