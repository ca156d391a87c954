"""Top-level window hosting the catalogue page."""

from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QWidget

from .facade import CatalogFacade
from .ui.controllers.catalog_controller import CatalogController
from .ui.widgets.catalog_page import CatalogPage

DEFAULT_WINDOW_SIZE = (960, 720)


class MainWindow(QMainWindow):
    """Own the facade for the lifetime of the window."""

    def __init__(
        self,
        facade: Optional[CatalogFacade] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("ShopLens")
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.facade = facade or CatalogFacade(parent=self)
        self.page = CatalogPage()
        self.setCentralWidget(self.page)
        self.controller = CatalogController(self.facade, self.page, parent=self)

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self.facade.shutdown()
        super().closeEvent(event)


__all__ = ["MainWindow"]
