"""Background worker that downloads and decodes one product thumbnail."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Qt, Signal
from PySide6.QtGui import QImage

from ....errors import ShopLensError
from ....io.catalog_client import CatalogClient

LOGGER = logging.getLogger(__name__)


class ThumbnailLoaderSignals(QObject):
    """Signals emitted by :class:`ThumbnailLoaderWorker`."""

    loaded = Signal(str, QImage)
    """Emitted with the source URL and the scaled image."""

    error = Signal(str, str)


class ThumbnailLoaderWorker(QRunnable):
    """Fetch *url* with :class:`CatalogClient` and scale it to fit a square box.

    Only ``QImage`` is touched here; the receiver turns it into a ``QPixmap``
    on the GUI thread.
    """

    def __init__(
        self,
        client: CatalogClient,
        url: str,
        signals: ThumbnailLoaderSignals,
        *,
        size: int,
    ) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._client = client
        self._url = url
        self._signals = signals
        self._size = max(1, int(size))

    def run(self) -> None:  # type: ignore[override]
        try:
            data = self._client.fetch_image(self._url)
        except ShopLensError as exc:
            LOGGER.warning("Thumbnail %s failed: %s", self._url, exc)
            self._signals.error.emit(self._url, str(exc))
            return

        image = QImage.fromData(data)
        if image.isNull():
            self._signals.error.emit(self._url, "Unsupported image data")
            return
        scaled = image.scaled(
            self._size,
            self._size,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._signals.loaded.emit(self._url, scaled.convertToFormat(QImage.Format.Format_ARGB32))


__all__ = ["ThumbnailLoaderSignals", "ThumbnailLoaderWorker"]
