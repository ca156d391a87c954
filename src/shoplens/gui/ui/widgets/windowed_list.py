"""Scroll area that realises only the product rows inside the viewport."""

from __future__ import annotations

import enum
import logging
from typing import List, Optional

from PySide6.QtCore import QModelIndex, Qt, Signal
from PySide6.QtGui import QHideEvent, QResizeEvent, QShowEvent
from PySide6.QtWidgets import QAbstractScrollArea, QFrame, QLabel, QWidget

from ....config import get_settings
from ....core.windowing import (
    RowSlotArena,
    ViewportWindow,
    compute_window,
    max_scroll_offset,
    slot_capacity,
)
from ..models.product_list_model import ProductListModel
from ..models.roles import Roles
from .. import palette
from ...thumbnails import ThumbnailCache
from .product_row import ProductRowWidget

logger = logging.getLogger(__name__)


class RendererState(enum.Enum):
    MEASURING = "measuring"
    READY = "ready"


class WindowedListView(QAbstractScrollArea):
    """Virtualised list of :class:`ProductRowWidget` slots.

    The scroll range always reflects ``count * row_height`` even though only
    the rows intersecting the viewport (plus overscan) exist as widgets.
    Scrolling and resizing recompute the window synchronously from the model's
    current records; they never ask for a new filtered view.
    """

    likeToggled = Signal(int)

    def __init__(
        self,
        *,
        row_height: Optional[int] = None,
        overscan: Optional[int] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("windowedProductList")
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.viewport().setStyleSheet(f"background: {palette.LIST_BACKGROUND_COLOR_HEX};")

        settings = get_settings()
        self._row_height = max(1, int(row_height if row_height is not None else settings.row_height))
        self._overscan = max(0, int(overscan if overscan is not None else settings.overscan))
        self._model: Optional[ProductListModel] = None
        self._state = RendererState.MEASURING
        self._window: Optional[ViewportWindow] = None
        self._thumbnails: Optional[ThumbnailCache] = None
        self._arena: RowSlotArena[ProductRowWidget] = RowSlotArena(self._create_row)

        self._empty_label = QLabel(palette.EMPTY_TEXT, self.viewport())
        self._empty_label.setObjectName("emptyStateLabel")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.hide()

        scroll_bar = self.verticalScrollBar()
        scroll_bar.setSingleStep(max(1, self._row_height // 4))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_model(self, model: Optional[ProductListModel]) -> None:
        previous = self._model
        if previous is model:
            return
        if previous is not None:
            try:
                previous.modelReset.disconnect(self._handle_model_reset)
                previous.dataChanged.disconnect(self._handle_data_changed)
            except (RuntimeError, TypeError):  # pragma: no cover - Qt disconnect noise
                pass
        self._model = model
        if model is not None:
            model.modelReset.connect(self._handle_model_reset)
            model.dataChanged.connect(self._handle_data_changed)
        self._handle_model_reset()

    def model(self) -> Optional[ProductListModel]:
        return self._model

    def set_thumbnail_source(self, source: Optional[ThumbnailCache]) -> None:
        self._thumbnails = source
        for row in self._arena.slots():
            row.set_thumbnail_source(source)

    def row_height(self) -> int:
        return self._row_height

    def state(self) -> RendererState:
        return self._state

    def visible_window(self) -> Optional[ViewportWindow]:
        """Return the window computed by the last layout pass."""

        return self._window

    def realized_rows(self) -> List[int]:
        """Indices currently bound to a row widget, ascending."""

        return self._arena.bound_indices()

    def row_widget(self, index: int) -> Optional[ProductRowWidget]:
        return self._arena.slot_for(index)

    def slot_count(self) -> int:
        return self._arena.capacity

    def is_empty_state_visible(self) -> bool:
        return not self._empty_label.isHidden()

    def scroll_to_offset(self, offset: int) -> None:
        self.verticalScrollBar().setValue(int(offset))

    # ------------------------------------------------------------------
    # QAbstractScrollArea overrides
    # ------------------------------------------------------------------
    def scrollContentsBy(self, dx: int, dy: int) -> None:  # type: ignore[override]
        self._relayout()

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._update_scroll_range()
        self._relayout()

    def showEvent(self, event: QShowEvent) -> None:  # type: ignore[override]
        super().showEvent(event)
        self._update_scroll_range()
        self._relayout()

    def hideEvent(self, event: QHideEvent) -> None:  # type: ignore[override]
        super().hideEvent(event)
        self._arena.release_all()
        self._window = None
        self._set_state(RendererState.MEASURING)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _create_row(self) -> ProductRowWidget:
        row = ProductRowWidget(self.viewport())
        row.likeToggled.connect(self.likeToggled)
        row.set_thumbnail_source(self._thumbnails)
        return row

    def _row_count(self) -> int:
        return self._model.rowCount() if self._model is not None else 0

    def _update_scroll_range(self) -> None:
        viewport_height = self.viewport().height()
        scroll_bar = self.verticalScrollBar()
        scroll_bar.setPageStep(max(1, viewport_height))
        scroll_bar.setRange(
            0, max_scroll_offset(self._row_count(), self._row_height, viewport_height)
        )

    def _handle_model_reset(self) -> None:
        self._update_scroll_range()
        scroll_bar = self.verticalScrollBar()
        if scroll_bar.value() != 0:
            # ``setValue`` triggers ``scrollContentsBy`` which lays out again.
            scroll_bar.setValue(0)
            return
        self._relayout()

    def _handle_data_changed(
        self,
        top_left: QModelIndex,
        bottom_right: QModelIndex,
        roles: list[int] | None = None,
    ) -> None:
        if roles and Roles.LIKED not in roles:
            return
        window = self._window
        if window is None or window.is_empty:
            return
        if bottom_right.row() < window.first or top_left.row() > window.last:
            return
        self._relayout()

    def _relayout(self) -> None:
        if not self.isVisible():
            # Hidden views keep no realised rows; showEvent lays out again.
            return
        model = self._model
        viewport = self.viewport()
        count = self._row_count()
        window = compute_window(
            count,
            self._row_height,
            viewport.height(),
            self.verticalScrollBar().value(),
            self._overscan,
        )
        self._window = window
        if window is None:
            self._arena.release_all()
            self._empty_label.hide()
            self._set_state(RendererState.MEASURING)
            return

        self._set_state(RendererState.READY)
        if window.is_empty or model is None:
            self._arena.release_all()
            self._empty_label.setGeometry(viewport.rect())
            self._empty_label.show()
            return

        self._empty_label.hide()
        # Size the arena for the worst-case window of this viewport so that
        # scrolling never changes the slot mapping.
        self._arena.ensure_capacity(
            slot_capacity(self._row_height, viewport.height(), self._overscan)
        )
        slots = self._arena.layout(window, model.records(), model.liked())
        width = viewport.width()
        height = max(1, self._row_height - palette.ROW_VERTICAL_GAP)
        for slot in slots:
            top = window.row_top(slot.bound_index()) - window.scroll_offset
            slot.setGeometry(0, top, width, height)

    def _set_state(self, state: RendererState) -> None:
        if state is self._state:
            return
        logger.debug("WindowedListView: %s -> %s", self._state.value, state.value)
        self._state = state


__all__ = ["RendererState", "WindowedListView"]
