"""One-shot asynchronous catalog load."""

import asyncio
import logging
from typing import Optional
from config.settings import Settings
from retrieval.catalog_provider import CatalogProvider, CatalogLoadError, SampleCatalogProvider
from retrieval.catalog_api_provider import CatalogAPIProvider
from retrieval.csv_catalog_provider import CSVCatalogProvider
from schemas.loading import CatalogLoadState
from schemas.product import Product

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> CatalogProvider:
    """Pick the catalog source: API, then CSV, then sample data."""
    if settings.catalog_api_url:
        logger.info(f"Using catalog API: {settings.catalog_api_url}")
        return CatalogAPIProvider(base_url=settings.catalog_api_url, timeout=settings.api_timeout)

    if settings.catalog_path:
        logger.info(f"Using CSV catalog: {settings.catalog_path}")
        return CSVCatalogProvider(csv_path=settings.catalog_path)

    logger.info("Using sample catalog")
    return SampleCatalogProvider()


def validate_catalog(products: list[Product]) -> None:
    """
    Check collection-level invariants.

    Raises:
        CatalogLoadError: If two products share an id
    """
    seen = set()
    for product in products:
        if product.id in seen:
            raise CatalogLoadError(f"Duplicate product id: {product.id}")
        seen.add(product.id)


class CatalogLoader:
    """
    Loads the catalog once per session.

    State moves NOT_STARTED -> LOADING -> LOADED | FAILED. There are no
    retries; once settled, load() returns the same state without refetching.
    """

    def __init__(self, provider: CatalogProvider, delay_seconds: float = 0.0):
        """
        Initialize loader.

        Args:
            provider: Catalog source
            delay_seconds: Simulated network latency before fetching
        """
        self.provider = provider
        self.delay_seconds = delay_seconds
        self._state = CatalogLoadState.not_started()
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> CatalogLoadState:
        """Current load state."""
        return self._state

    async def load(self) -> CatalogLoadState:
        """Run the load if it has not started yet and return the settled state."""
        if self._state.is_settled:
            return self._state

        if self._task is None:
            self._task = asyncio.ensure_future(self._load())

        return await self._task

    async def _load(self) -> CatalogLoadState:
        self._state = CatalogLoadState.loading()
        logger.info(f"Loading catalog from {self.provider.name} source")

        try:
            if self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)
            products = await asyncio.to_thread(self.provider.fetch_products)
            validate_catalog(products)
        except CatalogLoadError as e:
            logger.warning(f"Catalog load failed: {e}")
            self._state = CatalogLoadState.failed(str(e))
            return self._state

        self._state = CatalogLoadState.loaded(products)
        logger.info(f"Catalog loaded: {len(products)} products")
        return self._state
