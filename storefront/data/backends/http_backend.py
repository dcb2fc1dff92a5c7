from __future__ import annotations

import json
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..errors import ProductFetchError
from ..interface import ProductSource
from ..models import Product, ProductList
from ...config import get_config
from ...logging import get_logger


class HttpProductSource(ProductSource):
    """
    HTTP-backed implementation.
    - Issues one ``GET {base_url}{products_path}`` per call, no retries.
    - A non-2xx status, a transport error or a body that is not a JSON array of
      products all raise ProductFetchError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        products_path: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        config = get_config()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.products_path = products_path or config.products_path
        self.timeout = timeout if timeout is not None else config.request_timeout_s
        self._transport = transport
        self.logger = get_logger(__name__)

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.products_path}"

    def _client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def list_products(self) -> List[Product]:
        self.logger.debug(f"GET {self.url}")
        try:
            with self._client() as client:
                response = client.get(self.url)
        except httpx.HTTPError as e:
            self.logger.warning(f"Request to {self.url} failed: {e}")
            raise ProductFetchError(f"Failed to fetch products: {e}") from e

        self.logger.info(f"GET {self.url} -> {response.status_code}")
        if not response.is_success:
            raise ProductFetchError()

        try:
            return ProductList.validate_python(response.json())
        except json.JSONDecodeError as e:
            raise ProductFetchError(f"Malformed product response: {e}") from e
        except ValidationError as e:
            raise ProductFetchError(
                f"Unexpected product response shape ({e.error_count()} errors)"
            ) from e
