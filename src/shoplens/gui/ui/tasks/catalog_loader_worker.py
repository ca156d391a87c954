"""Background worker that downloads the catalogue."""

from __future__ import annotations

from PySide6.QtCore import QObject, QRunnable, Signal

from ....errors import ShopLensError
from ....io.catalog_client import CatalogClient
from ....utils.logging import get_logger

logger = get_logger()


class CatalogLoaderSignals(QObject):
    """Signals for the CatalogLoaderWorker."""

    loaded = Signal(int, object)  # token, CatalogPayload
    error = Signal(int, str)  # token, message


class CatalogLoaderWorker(QRunnable):
    """Fetch products and users with :class:`CatalogClient` on the thread pool."""

    def __init__(self, client: CatalogClient, token: int, signals: CatalogLoaderSignals) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._client = client
        self._token = token
        self._signals = signals

    def run(self) -> None:  # type: ignore[override]
        try:
            payload = self._client.fetch_catalog()
        except ShopLensError as exc:
            logger.error("Catalog load %d failed: %s", self._token, exc)
            self._signals.error.emit(self._token, str(exc))
            return
        except Exception as exc:  # pragma: no cover - keep pool threads alive on surprises
            logger.exception("Unexpected failure while loading catalog")
            self._signals.error.emit(self._token, str(exc))
            return
        self._signals.loaded.emit(self._token, payload)


__all__ = ["CatalogLoaderSignals", "CatalogLoaderWorker"]
