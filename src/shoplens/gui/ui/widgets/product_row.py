"""Reusable row widget showing one product in the windowed list."""

from __future__ import annotations

from typing import List, Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from ....models import JoinedRecord
from ...thumbnails import ThumbnailCache
from .. import palette


def format_meta(record: JoinedRecord) -> str:
    """Return the secondary line: category, price and image count."""

    product = record.product
    parts = []
    if product.category:
        parts.append(product.category)
    parts.append(f"${product.price:,.2f}")
    count = len(product.images)
    parts.append(f"{count} image" if count == 1 else f"{count} images")
    return " · ".join(parts)


class ProductRowWidget(QFrame):
    """A row slot that can be rebound to any record.

    The widget keeps only what the latest :meth:`bind` supplied.  The like
    button reports the product id of the current binding, so a slot that
    was recycled from product A to product B can never toggle A.
    Thumbnails follow the same rule: a download that finishes after the slot
    was rebound is shown only if its URL belongs to the new record.
    """

    likeToggled = Signal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("productRow")
        self.setStyleSheet(palette.ROW_STYLESHEET)
        self._index: int = -1
        self._record: Optional[JoinedRecord] = None
        self._liked = False
        self._thumbnails: Optional[ThumbnailCache] = None

        self.thumbnail_labels: List[QLabel] = []
        thumbnail_layout = QHBoxLayout()
        thumbnail_layout.setContentsMargins(0, 0, 0, 0)
        thumbnail_layout.setSpacing(palette.THUMBNAIL_SPACING)
        for _ in range(palette.MAX_ROW_THUMBNAILS):
            label = QLabel()
            label.setObjectName("productThumbnail")
            label.setFixedSize(palette.THUMBNAIL_SIZE, palette.THUMBNAIL_SIZE)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.hide()
            thumbnail_layout.addWidget(label)
            self.thumbnail_labels.append(label)

        self.title_label = QLabel()
        self.title_label.setObjectName("productTitle")
        font = self.title_label.font()
        font.setPointSize(palette.ROW_TITLE_POINT_SIZE)
        self.title_label.setFont(font)

        self.description_label = QLabel()
        self.description_label.setObjectName("productDescription")
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)

        self.meta_label = QLabel()
        self.meta_label.setObjectName("productMeta")

        self.user_label = QLabel()
        self.user_label.setObjectName("productUser")

        self.like_button = QPushButton()
        self.like_button.setFixedWidth(palette.ROW_BUTTON_WIDTH)
        self.like_button.clicked.connect(self._handle_like_clicked)

        text_layout = QVBoxLayout()
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(4)
        text_layout.addWidget(self.title_label)
        text_layout.addWidget(self.description_label, 1)
        text_layout.addWidget(self.meta_label)
        text_layout.addWidget(self.user_label)

        layout = QHBoxLayout(self)
        padding = palette.ROW_PADDING
        layout.setContentsMargins(padding, padding, padding, padding)
        layout.setSpacing(palette.ROW_PADDING)
        layout.addLayout(thumbnail_layout)
        layout.addLayout(text_layout, 1)
        layout.addWidget(self.like_button, 0, Qt.AlignmentFlag.AlignBottom)

        self.release()

    # ------------------------------------------------------------------
    # RowSlot protocol
    # ------------------------------------------------------------------
    def bind(self, index: int, record: JoinedRecord, liked: bool) -> None:
        if record is not self._record:
            product = record.product
            self.title_label.setText(product.title)
            self.description_label.setText(product.description)
            self.meta_label.setText(format_meta(record))
            user = record.user
            self.user_label.setText(user.display_name if user is not None else "")
            self.user_label.setVisible(user is not None)
            self._record = record
            self._refresh_thumbnails()
        self._index = index
        self.set_liked(liked)
        self.setVisible(True)

    def release(self) -> None:
        self._index = -1
        self._record = None
        self._liked = False
        for label in self.thumbnail_labels:
            label.clear()
            label.hide()
        self.hide()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def bound_index(self) -> int:
        return self._index

    def bound_product_id(self) -> Optional[int]:
        return self._record.product_id if self._record is not None else None

    def is_liked(self) -> bool:
        return self._liked

    def set_liked(self, liked: bool) -> None:
        self._liked = bool(liked)
        self.like_button.setText("Unlike" if self._liked else "Like")

    def set_thumbnail_source(self, source: Optional[ThumbnailCache]) -> None:
        """Use *source* for thumbnails; the current binding is refreshed from it."""

        previous = self._thumbnails
        if previous is source:
            return
        if previous is not None:
            try:
                previous.thumbnailReady.disconnect(self._handle_thumbnail_ready)
            except (RuntimeError, TypeError):  # pragma: no cover - Qt disconnect noise
                pass
        self._thumbnails = source
        if source is not None:
            source.thumbnailReady.connect(self._handle_thumbnail_ready)
        self._refresh_thumbnails()

    def thumbnail_urls(self) -> Tuple[str, ...]:
        """URLs the bound record wants shown, in label order."""

        if self._record is None:
            return ()
        return self._record.product.images[: palette.MAX_ROW_THUMBNAILS]

    def has_thumbnail(self, position: int) -> bool:
        pixmap = self.thumbnail_labels[position].pixmap()
        return pixmap is not None and not pixmap.isNull()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _handle_like_clicked(self) -> None:
        product_id = self.bound_product_id()
        if product_id is None:
            return
        self.likeToggled.emit(product_id)

    def _refresh_thumbnails(self) -> None:
        urls = self.thumbnail_urls()
        for position, label in enumerate(self.thumbnail_labels):
            label.clear()
            if position >= len(urls):
                label.hide()
                continue
            label.show()
            if self._thumbnails is None:
                continue
            pixmap = self._thumbnails.request(urls[position])
            if pixmap is not None:
                label.setPixmap(pixmap)

    def _handle_thumbnail_ready(self, url: str, pixmap: QPixmap) -> None:
        # Replies for a previous binding no longer match any current URL.
        for position, candidate in enumerate(self.thumbnail_urls()):
            if candidate == url:
                self.thumbnail_labels[position].setPixmap(pixmap)


__all__ = ["ProductRowWidget", "format_meta"]
