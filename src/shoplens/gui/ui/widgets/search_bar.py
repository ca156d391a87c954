"""Search field with a non-blocking pending indicator."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QWidget

from .. import palette


class SearchBar(QWidget):
    """Line edit that reports every edit and shows when results are catching up."""

    queryEdited = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("searchBar")

        self.line_edit = QLineEdit()
        self.line_edit.setObjectName("searchInput")
        self.line_edit.setPlaceholderText(palette.SEARCH_PLACEHOLDER)
        self.line_edit.setClearButtonEnabled(True)
        self.line_edit.textChanged.connect(self.queryEdited)

        self.pending_label = QLabel(palette.PENDING_TEXT)
        self.pending_label.setObjectName("searchPending")
        self.pending_label.setAccessibleName(palette.PENDING_TEXT)
        self.pending_label.hide()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(*palette.SEARCH_BAR_MARGIN)
        layout.setSpacing(palette.SEARCH_BAR_SPACING)
        layout.addWidget(self.line_edit, 1)
        layout.addWidget(self.pending_label)

    def text(self) -> str:
        return self.line_edit.text()

    def set_pending(self, pending: bool) -> None:
        self.pending_label.setVisible(bool(pending))

    def is_pending_visible(self) -> bool:
        return not self.pending_label.isHidden()


__all__ = ["SearchBar"]
