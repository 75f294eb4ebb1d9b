"""Catalog product and sponsor schemas."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """One catalog listing. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    title: str
    brand: str = Field(..., min_length=1)
    caliber: str = Field(..., min_length=1)
    price: float = Field(..., ge=0.0, description="Price per unit in dollars")
    qty: int = Field(..., ge=0, description="Rounds per unit")
    stock: str = Field("In Stock", description="Stock status label")
    link: str = Field(..., description="Vendor product page URL")
    image: str = Field("", description="Display image URL")


class Sponsor(BaseModel):
    """Sponsor banner shown in the storefront header."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    img: str
    url: str
