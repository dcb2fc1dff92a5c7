# storefront/data/interface.py
from __future__ import annotations

from typing import List, Protocol

from .models import Product


# ---- Data access protocol ----

class ProductSource(Protocol):
    """
    Backend-agnostic contract for the storefront page.

    - Implementations MUST NOT cache: each call fetches a fresh snapshot.
    - Any failure is raised as ProductFetchError; a partial list is never returned.
    """

    def list_products(self) -> List[Product]:
        """Return the product list in the order the backend serves it."""
        ...
