"""Application settings."""

import os
from typing import Optional
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Storefront configuration settings."""

    # Branding
    site_name: str = "AmmoScout"
    tagline: str = "Search & compare ammo prices — sponsor & affiliate-enabled."

    # Affiliate redirect service (destination URL is appended percent-encoded)
    affiliate_base: Optional[str] = None

    # Catalog source: API takes precedence over CSV, sample data otherwise
    catalog_path: Optional[str] = None
    catalog_api_url: Optional[str] = None
    api_timeout: int = 10

    # Simulated network latency for the initial load
    load_delay_ms: int = Field(400, ge=0)

    # Listing
    page_size: int = Field(6, ge=1)

    # Export
    export_filename: str = "ammoscout_export.csv"

    # Logging
    verbose: bool = False

    def __init__(self, **data):
        # Fill catalog source and affiliate base from environment if not provided
        if data.get("catalog_path") is None:
            data["catalog_path"] = os.environ.get("AMMOSCOUT_CATALOG_PATH")

        if data.get("catalog_api_url") is None:
            data["catalog_api_url"] = os.environ.get("AMMOSCOUT_CATALOG_API_URL")

        if data.get("affiliate_base") is None:
            data["affiliate_base"] = os.environ.get(
                "AMMOSCOUT_AFFILIATE_BASE",
                "https://example-affiliate.com/redirect?url="
            )

        super().__init__(**data)

    @property
    def load_delay_seconds(self) -> float:
        """Load delay converted to seconds."""
        return self.load_delay_ms / 1000.0
