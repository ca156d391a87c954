"""Immutable catalogue records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..errors import CatalogPayloadError


def _require(payload: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return payload[key]
    except KeyError as exc:
        raise CatalogPayloadError(f"{kind} record is missing {key!r}") from exc


def _as_int(value: Any, key: str, kind: str) -> int:
    if isinstance(value, bool):
        raise CatalogPayloadError(f"{kind} field {key!r} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise CatalogPayloadError(f"{kind} field {key!r} must be an integer") from exc


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Product:
    """A catalogue product as delivered by the products endpoint."""

    id: int
    title: str
    category: str = ""
    price: float = 0.0
    description: str = ""
    images: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Product":
        """Build a product from a decoded JSON object.

        ``id`` and ``title`` are mandatory; the remaining fields fall back to
        neutral values because the API omits them for some items.
        """

        if not isinstance(payload, Mapping):
            raise CatalogPayloadError("Product record must be a JSON object")
        product_id = _as_int(_require(payload, "id", "Product"), "id", "Product")
        title = _as_text(_require(payload, "title", "Product"))
        raw_price = payload.get("price", 0.0)
        try:
            price = float(raw_price) if raw_price is not None else 0.0
        except (TypeError, ValueError) as exc:
            raise CatalogPayloadError("Product field 'price' must be a number") from exc
        raw_images = payload.get("images") or ()
        if isinstance(raw_images, str) or not isinstance(raw_images, (list, tuple)):
            raise CatalogPayloadError("Product field 'images' must be a list of URLs")
        return cls(
            id=product_id,
            title=title,
            category=_as_text(payload.get("category")),
            price=price,
            description=_as_text(payload.get("description")),
            images=tuple(str(src) for src in raw_images),
        )


@dataclass(frozen=True)
class User:
    """A user from the users endpoint; only the name fields are kept."""

    id: int
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "User":
        if not isinstance(payload, Mapping):
            raise CatalogPayloadError("User record must be a JSON object")
        return cls(
            id=_as_int(_require(payload, "id", "User"), "id", "User"),
            first_name=_as_text(_require(payload, "firstName", "User")),
            last_name=_as_text(_require(payload, "lastName", "User")),
        )


@dataclass(frozen=True)
class JoinedRecord:
    """A product with the user attached by the join index, if any."""

    product: Product
    user: Optional[User] = None

    @property
    def product_id(self) -> int:
        return self.product.id


__all__ = ["JoinedRecord", "Product", "User"]
