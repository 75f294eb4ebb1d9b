"""Catalog API provider for remote product feeds."""

import logging
from typing import Optional
import requests
from pydantic import ValidationError
from retrieval.catalog_provider import CatalogProvider, CatalogLoadError
from schemas.product import Product

logger = logging.getLogger(__name__)


class CatalogAPIProvider(CatalogProvider):
    """
    Remote catalog provider.

    Fetches the whole product feed in one request. Accepts either a bare
    JSON array or an object wrapping it under "products", "results" or "data".
    Any failure is raised as CatalogLoadError so the storefront can show it.
    """

    name = "api"

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        auth_token: Optional[str] = None
    ):
        """
        Initialize Catalog API provider.

        Args:
            base_url: Base URL for the catalog API (e.g., https://feeds.example.com/api)
            timeout: Request timeout in seconds (default: 10)
            auth_token: Optional authentication token
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.auth_token = auth_token
        self._last_error: Optional[str] = None

    def _get_headers(self) -> dict:
        """Build request headers."""
        headers = {
            "Accept": "application/json",
            "User-Agent": "AmmoScout/1.0"
        }
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    def _handle_error(self, message: str, cause: Optional[Exception] = None) -> CatalogLoadError:
        """
        Record an API error and build the exception to raise.

        Args:
            message: Human readable description
            cause: Underlying exception, if any
        """
        self._last_error = message
        logger.warning(f"Catalog API error: {message}")
        error = CatalogLoadError(message)
        error.__cause__ = cause
        return error

    def fetch_products(self) -> list[Product]:
        """
        Fetch the product feed via API.

        Returns:
            Products in feed order

        Raises:
            CatalogLoadError: On transport errors, bad status codes or invalid records
        """
        url = f"{self.base_url}/products"
        try:
            response = requests.get(
                url,
                headers=self._get_headers(),
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise self._handle_error(f"Request timeout after {self.timeout}s", e)
        except requests.exceptions.RequestException as e:
            raise self._handle_error(f"Request failed: {e}", e)

        # Handle authentication errors
        if response.status_code in (401, 403):
            raise self._handle_error(f"Authentication failed: {response.status_code}")

        # Handle other errors
        if response.status_code != 200:
            raise self._handle_error(f"API returned status {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise self._handle_error("API returned invalid JSON", e)

        # Handle different response formats
        # Expected format: {"products": [...]} or direct array [...]
        if isinstance(data, dict):
            items = data.get("products") or data.get("results") or data.get("data") or []
        elif isinstance(data, list):
            items = data
        else:
            raise self._handle_error(f"Unexpected API response format: {type(data).__name__}")

        if not isinstance(items, list):
            raise self._handle_error(f"Unexpected API response format: {type(items).__name__}")

        products = []
        for index, item in enumerate(items):
            try:
                products.append(self._parse_product(item))
            except (ValidationError, TypeError) as e:
                raise self._handle_error(f"Invalid product at index {index}: {e}", e)

        self._last_error = None
        logger.info(f"Fetched {len(products)} products from {url}")
        return products

    def _parse_product(self, item: dict) -> Product:
        """
        Parse API response item to Product.

        Args:
            item: API response item (dict)

        Returns:
            Validated Product
        """
        if not isinstance(item, dict):
            raise TypeError(f"expected object, got {type(item).__name__}")

        # Handle various field name conventions
        return Product(
            id=str(item.get("id") or item.get("sku") or ""),
            title=item.get("title") or item.get("name") or "",
            brand=item.get("brand") or item.get("manufacturer") or "",
            caliber=item.get("caliber") or item.get("gauge") or "",
            price=item.get("price"),
            qty=item.get("qty", item.get("rounds")),
            stock=item.get("stock") or item.get("availability") or "In Stock",
            link=item.get("link") or item.get("url") or "",
            image=item.get("image") or item.get("image_url") or "",
        )

    def get_last_error(self) -> Optional[str]:
        """Get the last error message."""
        return self._last_error
