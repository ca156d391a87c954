"""List model exposing the filtered product view to Qt views."""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, FrozenSet, Optional, Sequence, Tuple

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from ....models import JoinedRecord
from .roles import Roles, role_names

logger = logging.getLogger(__name__)


class ProductListModel(QAbstractListModel):
    """Hold the current :class:`JoinedRecord` tuple and liked set.

    The model never edits the tuple it was given.  A new filtered view
    replaces the old one with a model reset; a like toggle only emits
    ``dataChanged`` for the rows whose liked state actually flipped.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._records: Tuple[JoinedRecord, ...] = ()
        self._liked: FrozenSet[int] = frozenset()
        self._row_lookup: Dict[int, int] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_records(self, records: Sequence[JoinedRecord]) -> None:
        """Replace the rows with *records*."""

        records = tuple(records)
        if records is self._records:
            return
        self.beginResetModel()
        self._records = records
        self._rebuild_lookup()
        self.endResetModel()

    def records(self) -> Tuple[JoinedRecord, ...]:
        return self._records

    def record_at(self, row: int) -> Optional[JoinedRecord]:
        if not (0 <= row < len(self._records)):
            return None
        return self._records[row]

    def set_liked(self, liked: AbstractSet[int]) -> None:
        """Publish a new liked set and notify only the rows that changed."""

        liked = frozenset(liked)
        if liked == self._liked:
            self._liked = liked
            return
        flipped = liked ^ self._liked
        self._liked = liked
        for product_id in flipped:
            row = self._row_lookup.get(product_id)
            if row is None:
                continue
            model_index = self.index(row, 0)
            self.dataChanged.emit(model_index, model_index, [Roles.LIKED])

    def liked(self) -> FrozenSet[int]:
        return self._liked

    def row_for_product(self, product_id: int) -> Optional[int]:
        return self._row_lookup.get(product_id)

    # ------------------------------------------------------------------
    # Qt model implementation
    # ------------------------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = None) -> int:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return 0
        return len(self._records)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._records)):
            return None
        record = self._records[index.row()]
        product = record.product
        if role in (Qt.DisplayRole, Roles.TITLE):
            return product.title
        if role == Roles.PRODUCT_ID:
            return product.id
        if role == Roles.DESCRIPTION:
            return product.description
        if role == Roles.CATEGORY:
            return product.category
        if role == Roles.PRICE:
            return product.price
        if role == Roles.IMAGES:
            return list(product.images)
        if role == Roles.USER_NAME:
            return record.user.display_name if record.user is not None else None
        if role == Roles.LIKED:
            return product.id in self._liked
        return None

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return role_names(super().roleNames())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _rebuild_lookup(self) -> None:
        # Product ids are unique in the catalogue; if a payload breaks that,
        # the first occurrence wins for targeted updates.
        lookup: Dict[int, int] = {}
        for row, record in enumerate(self._records):
            lookup.setdefault(record.product_id, row)
        self._row_lookup = lookup
        if len(lookup) != len(self._records):
            logger.warning(
                "ProductListModel: %d duplicate product ids in view",
                len(self._records) - len(lookup),
            )


__all__ = ["ProductListModel"]
