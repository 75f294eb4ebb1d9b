"""Catalog provider interface with in-memory sample implementation."""

from schemas.product import Product, Sponsor


class CatalogLoadError(Exception):
    """Raised when a catalog source cannot supply a valid product collection."""


class CatalogProvider:
    """Interface for catalog sources. Returns the full collection in one call."""

    name = "catalog"

    def fetch_products(self) -> list[Product]:
        """
        Fetch the full product collection.

        Returns:
            Products in catalog order

        Raises:
            CatalogLoadError: If the source is unavailable or malformed
        """
        raise NotImplementedError

    def fetch_sponsors(self) -> list[Sponsor]:
        """Sponsor banners for the header. Sources without sponsors return none."""
        return []


class SampleCatalogProvider(CatalogProvider):
    """Static sample catalog used when no real source is configured."""

    name = "sample"

    def __init__(self):
        """Initialize with sample data."""
        self._sample_catalog = self._create_sample_catalog()
        self._sponsors = [
            Sponsor(
                id=1,
                name="RangeReady",
                img="https://placehold.co/300x80?text=RangeReady+Sponsor",
                url="https://example-sponsor.com",
            ),
        ]

    def _create_sample_catalog(self) -> list[Product]:
        """Create sample catalog data."""
        return [
            Product(
                id="p1",
                title="Federal Premium 9mm Luger 115gr FMJ",
                brand="Federal",
                caliber="9mm",
                price=24.99,
                qty=50,
                stock="In Stock",
                link="https://vendor.example/product/p1",
                image="https://placehold.co/420x280?text=9mm+Federal",
            ),
            Product(
                id="p2",
                title="Winchester .223 Rem 55gr FMJ",
                brand="Winchester",
                caliber=".223 Rem",
                price=28.5,
                qty=20,
                stock="Low Stock",
                link="https://vendor.example/product/p2",
                image="https://placehold.co/420x280?text=.223+Winchester",
            ),
            Product(
                id="p3",
                title='Remington 12ga 2-3/4" 1oz',
                brand="Remington",
                caliber="12ga",
                price=15.0,
                qty=200,
                stock="In Stock",
                link="https://vendor.example/product/p3",
                image="https://placehold.co/420x280?text=12ga+Remington",
            ),
        ]

    def fetch_products(self) -> list[Product]:
        """Return the sample products."""
        return list(self._sample_catalog)

    def fetch_sponsors(self) -> list[Sponsor]:
        """Return the sample sponsor banners."""
        return list(self._sponsors)
