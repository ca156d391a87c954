"""Controller wiring the catalogue page widgets to :class:`CatalogFacade`."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject

from ....core.record_store import CatalogSnapshot, LoadStatus
from ...facade import CatalogFacade
from ..widgets.catalog_page import CatalogPage


class CatalogController(QObject):
    """Keep the page, search bar and list in sync with the facade."""

    def __init__(
        self,
        facade: CatalogFacade,
        page: CatalogPage,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._facade = facade
        self._page = page

        page.list_view.set_model(facade.list_model)
        page.list_view.set_thumbnail_source(facade.thumbnails)
        page.search_bar.queryEdited.connect(facade.set_query)
        page.list_view.likeToggled.connect(self._handle_like_toggled)
        facade.pendingChanged.connect(page.search_bar.set_pending)
        facade.snapshotChanged.connect(self._handle_snapshot_changed)

        self._handle_snapshot_changed(facade.snapshot())

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------
    def _handle_snapshot_changed(self, snapshot: CatalogSnapshot) -> None:
        if snapshot.status is LoadStatus.READY:
            self._page.show_list()
        elif snapshot.status is LoadStatus.ERROR:
            self._page.show_error(snapshot.error or "")
        else:
            self._page.show_loading()

    def _handle_like_toggled(self, product_id: int) -> None:
        self._facade.toggle_like(product_id)


__all__ = ["CatalogController"]
