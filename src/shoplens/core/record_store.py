"""Snapshot holder for the fetched catalogue collections."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ..models import Product, User

logger = logging.getLogger(__name__)


class LoadStatus(enum.Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Everything the pipeline knows about the upstream data at one instant."""

    status: LoadStatus = LoadStatus.LOADING
    products: Tuple[Product, ...] = field(default=())
    users: Tuple[User, ...] = field(default=())
    error: Optional[str] = None
    version: int = 0

    @property
    def is_available(self) -> bool:
        return self.status is LoadStatus.READY


class RecordStore:
    """Publish immutable :class:`CatalogSnapshot` values.

    The store never edits a published snapshot; every transition produces a
    new one with an incremented ``version``.  When only the product list
    changes the previous ``users`` tuple is carried over by identity, so
    downstream caches keyed on it stay valid.
    """

    def __init__(self) -> None:
        self._snapshot = CatalogSnapshot()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    def mark_loading(self) -> CatalogSnapshot:
        current = self._snapshot
        self._snapshot = CatalogSnapshot(
            status=LoadStatus.LOADING,
            products=current.products,
            users=current.users,
            version=current.version + 1,
        )
        return self._snapshot

    def publish(
        self,
        products: Optional[Iterable[Product]] = None,
        users: Optional[Iterable[User]] = None,
    ) -> CatalogSnapshot:
        """Replace one or both collections and mark the store ready.

        ``None`` keeps the current collection (same tuple object).
        """

        current = self._snapshot
        new_products = current.products if products is None else tuple(products)
        new_users = current.users if users is None else tuple(users)
        self._snapshot = CatalogSnapshot(
            status=LoadStatus.READY,
            products=new_products,
            users=new_users,
            version=current.version + 1,
        )
        logger.debug(
            "Catalog snapshot v%d: %d products, %d users",
            self._snapshot.version,
            len(new_products),
            len(new_users),
        )
        return self._snapshot

    def fail(self, message: str) -> CatalogSnapshot:
        current = self._snapshot
        self._snapshot = CatalogSnapshot(
            status=LoadStatus.ERROR,
            error=message,
            version=current.version + 1,
        )
        return self._snapshot


__all__ = ["CatalogSnapshot", "LoadStatus", "RecordStore"]
