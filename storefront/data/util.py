from __future__ import annotations

from typing import Literal, Optional

from .backends.file_backend import JsonFileProductSource
from .backends.http_backend import HttpProductSource
from .interface import ProductSource
from ..config import get_config


def get_product_source(kind: Optional[Literal["http", "file"]] = None) -> ProductSource:
    config = get_config()
    kind = kind or config.product_source
    if kind == "http":
        return HttpProductSource()
    if kind == "file":
        # Reads from the configured JSON file
        return JsonFileProductSource(path=config.products_file)
    raise ValueError(f"Unknown product source kind: {kind}")
