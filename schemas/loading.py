"""Catalog load state schemas."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from .product import Product


class LoadStatus(str, Enum):
    """Phase of the one-shot catalog load."""
    NOT_STARTED = "not_started"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CatalogLoadState(BaseModel):
    """Load phase together with its payload.

    ``products`` is only populated once LOADED and ``error`` only once FAILED.
    """
    model_config = ConfigDict(frozen=True)

    status: LoadStatus = LoadStatus.NOT_STARTED
    products: tuple[Product, ...] = Field(default_factory=tuple)
    error: Optional[str] = None

    @classmethod
    def not_started(cls) -> "CatalogLoadState":
        return cls()

    @classmethod
    def loading(cls) -> "CatalogLoadState":
        return cls(status=LoadStatus.LOADING)

    @classmethod
    def loaded(cls, products) -> "CatalogLoadState":
        return cls(status=LoadStatus.LOADED, products=tuple(products))

    @classmethod
    def failed(cls, reason: str) -> "CatalogLoadState":
        return cls(status=LoadStatus.FAILED, error=reason)

    @property
    def is_settled(self) -> bool:
        """True once the load has either succeeded or failed."""
        return self.status in (LoadStatus.LOADED, LoadStatus.FAILED)
