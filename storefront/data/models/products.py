from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Product(BaseModel):
    """A product as served by the storefront API."""
    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(description="Unique product identifier, assigned by the backend")
    name: str = Field(description="Product display name")
    price_in_cents: int = Field(ge=0, description="Price in minor currency units")
    image_url: str = Field(description="Reference to the product image")


# Validates a decoded JSON body as an ordered product list
ProductList = TypeAdapter(List[Product])
