from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import ValidationError

from ..errors import ProductFetchError
from ..interface import ProductSource
from ..models import Product, ProductList
from ...config import get_config
from ...logging import get_logger


class JsonFileProductSource(ProductSource):
    """
    JSON-file-backed implementation for local development.
    - Reads the same array the API serves, from ``path``.
    - Re-reads the file on every call so edits show up on the next page run.
    """

    def __init__(self, path: str | Path = None) -> None:
        if path is None:
            path = get_config().products_file

        self.path = Path(path)
        self.logger = get_logger(__name__)

        # If the path is relative, make it relative to the repository root
        if not self.path.is_absolute():
            current = Path.cwd()
            repo_root = None

            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            self.path = (repo_root or current) / self.path

    def list_products(self) -> List[Product]:
        self.logger.debug(f"Reading products from {self.path}")
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise ProductFetchError(f"Failed to fetch products: {e}") from e

        try:
            return ProductList.validate_json(raw)
        except ValidationError as e:
            raise ProductFetchError(
                f"Malformed product file {self.path.name} ({e.error_count()} errors)"
            ) from e
