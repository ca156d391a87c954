"""Page combining the search bar with the windowed product list."""

from __future__ import annotations

import enum

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QStackedWidget, QVBoxLayout, QWidget

from .. import palette
from .search_bar import SearchBar
from .windowed_list import WindowedListView


class PageState(enum.IntEnum):
    LOADING = 0
    ERROR = 1
    LIST = 2


class CatalogPage(QWidget):
    """Thin container exposing the search bar and list as a self-contained page.

    The page only switches between its loading, error and list states; the
    list view itself renders the empty state when a search matches nothing.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("catalogPage")

        self.search_bar = SearchBar()
        self.list_view = WindowedListView()

        self.loading_label = QLabel(palette.LOADING_TEXT)
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.error_label = QLabel()
        self.error_label.setObjectName("errorLabel")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {palette.ERROR_TEXT_COLOR_HEX};")

        self._stack = QStackedWidget()
        self._stack.insertWidget(PageState.LOADING, self.loading_label)
        self._stack.insertWidget(PageState.ERROR, self.error_label)
        self._stack.insertWidget(PageState.LIST, self.list_view)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.search_bar)
        layout.addWidget(self._stack, 1)

        self.show_loading()

    def show_loading(self) -> None:
        self._stack.setCurrentIndex(PageState.LOADING)

    def show_error(self, message: str) -> None:
        self.error_label.setText(f"{palette.ERROR_PREFIX}{message}")
        self._stack.setCurrentIndex(PageState.ERROR)

    def show_list(self) -> None:
        self._stack.setCurrentIndex(PageState.LIST)

    def state(self) -> PageState:
        return PageState(self._stack.currentIndex())


__all__ = ["CatalogPage", "PageState"]
