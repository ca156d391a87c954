"""URL-keyed thumbnail cache backed by :class:`ThumbnailLoaderWorker`."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Optional, Set

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage, QPixmap

from ..config import get_settings
from ..io.catalog_client import CatalogClient
from .ui import palette
from .ui.tasks.thumbnail_loader_worker import ThumbnailLoaderSignals, ThumbnailLoaderWorker

logger = logging.getLogger(__name__)


class ThumbnailCache(QObject):
    """Hand out product thumbnails, downloading each URL at most once.

    :meth:`request` answers from memory when it can and otherwise starts a
    worker.  Finished downloads are announced through ``thumbnailReady`` to
    every listener; each row decides for itself whether the URL still belongs
    to the record it shows.
    """

    thumbnailReady = Signal(str, QPixmap)
    thumbnailFailed = Signal(str)

    def __init__(
        self,
        client: CatalogClient,
        thread_pool: QThreadPool,
        *,
        size: int = palette.THUMBNAIL_SIZE,
        capacity: Optional[int] = None,
        enabled: Optional[bool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        settings = get_settings()
        self._client = client
        self._thread_pool = thread_pool
        self._size = size
        self._capacity = max(1, capacity if capacity is not None else settings.thumbnail_cache_size)
        self._enabled = settings.load_thumbnails if enabled is None else bool(enabled)
        self._pixmaps: "OrderedDict[str, QPixmap]" = OrderedDict()
        self._in_flight: Set[str] = set()
        self._failed: Set[str] = set()

        self._signals = ThumbnailLoaderSignals(self)
        self._signals.loaded.connect(self._on_loaded)
        self._signals.error.connect(self._on_error)

    def request(self, url: str) -> Optional[QPixmap]:
        """Return the cached pixmap for *url*, scheduling a download on a miss."""

        pixmap = self._pixmaps.get(url)
        if pixmap is not None:
            self._pixmaps.move_to_end(url)
            return pixmap
        if not self._enabled or not url or url in self._in_flight or url in self._failed:
            return None
        self._in_flight.add(url)
        worker = ThumbnailLoaderWorker(self._client, url, self._signals, size=self._size)
        self._thread_pool.start(worker)
        return None

    def cached(self, url: str) -> Optional[QPixmap]:
        return self._pixmaps.get(url)

    def is_loading(self, url: str) -> bool:
        return url in self._in_flight

    def __len__(self) -> int:
        return len(self._pixmaps)

    @Slot(str, QImage)
    def _on_loaded(self, url: str, image: QImage) -> None:
        self._in_flight.discard(url)
        pixmap = QPixmap.fromImage(image)
        self._pixmaps[url] = pixmap
        self._pixmaps.move_to_end(url)
        while len(self._pixmaps) > self._capacity:
            self._pixmaps.popitem(last=False)
        self.thumbnailReady.emit(url, pixmap)

    @Slot(str, str)
    def _on_error(self, url: str, message: str) -> None:
        self._in_flight.discard(url)
        # Failed URLs are not retried for the lifetime of the cache.
        self._failed.add(url)
        logger.debug("Thumbnail unavailable for %s: %s", url, message)
        self.thumbnailFailed.emit(url)


__all__ = ["ThumbnailCache"]
