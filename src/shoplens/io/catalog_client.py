"""HTTP client for the DummyJSON-style catalogue endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import httpx

from ..config import get_settings
from ..errors import CatalogFetchError, CatalogPayloadError
from ..models import Product, User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogPayload:
    """Decoded result of one catalogue fetch."""

    products: Tuple[Product, ...]
    users: Tuple[User, ...]


class CatalogClient:
    """Fetch products and users in one go.

    The client performs a single attempt per endpoint; retry policy belongs
    to whoever schedules the load.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        limit: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._limit = int(limit if limit is not None else settings.fetch_limit)
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def fetch_catalog(self) -> CatalogPayload:
        """Return both collections or raise a :class:`~shoplens.errors.ShopLensError`."""

        params = {"limit": self._limit}
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                product_response = client.get("/products", params=params)
                user_response = client.get("/users", params=params)
        except httpx.HTTPError as exc:
            logger.error("Catalog request to %s failed: %s", self._base_url, exc)
            raise CatalogFetchError(f"Could not reach {self._base_url}: {exc}") from exc

        if product_response.status_code != 200 or user_response.status_code != 200:
            raise CatalogFetchError(
                f"HTTP {product_response.status_code}/{user_response.status_code}"
            )

        products = [
            Product.from_payload(item)
            for item in self._extract_list(product_response, "products")
        ]
        users = [User.from_payload(item) for item in self._extract_list(user_response, "users")]
        logger.info("Fetched %d products and %d users", len(products), len(users))
        return CatalogPayload(products=tuple(products), users=tuple(users))

    def fetch_image(self, url: str) -> bytes:
        """Download the raw bytes of one product image.

        Image URLs in the catalogue are absolute and usually live on a CDN,
        so they bypass the API base URL.
        """

        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Could not fetch {url}: {exc}") from exc
        if response.status_code != 200:
            raise CatalogFetchError(f"HTTP {response.status_code} for {url}")
        return response.content

    @staticmethod
    def _extract_list(response: httpx.Response, key: str) -> List[Any]:
        try:
            body = response.json()
        except ValueError as exc:
            raise CatalogPayloadError(f"{key} response is not valid JSON") from exc
        if not isinstance(body, dict):
            raise CatalogPayloadError(f"{key} response must be a JSON object")
        items = body.get(key)
        if items is None:
            return []
        if not isinstance(items, list):
            raise CatalogPayloadError(f"{key!r} must be a list")
        return items


__all__ = ["CatalogClient", "CatalogPayload"]
