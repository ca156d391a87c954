"""Single owner of the catalogue pipeline state for the GUI."""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Set, Tuple

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from ..config import get_settings
from ..core.join_index import JoinIndex, JoinKey, build_join_index, join_records
from ..core.memo import DerivedCache
from ..core.record_store import CatalogSnapshot, RecordStore
from ..core.selection import SelectionStore
from ..io.catalog_client import CatalogClient, CatalogPayload
from ..models import JoinedRecord, Product, User
from .scheduler import DeferredQueryScheduler
from .thumbnails import ThumbnailCache
from .ui.models.product_list_model import ProductListModel
from .ui.tasks.catalog_loader_worker import CatalogLoaderSignals, CatalogLoaderWorker

logger = logging.getLogger(__name__)


class CatalogFacade(QObject):
    """Tie together the record store, join, scheduler, selection and list model.

    Widgets talk to the facade only; the facade never touches widgets.  Every
    collection it hands out is an immutable snapshot, so the scheduler may
    filter a tuple on a worker thread while the GUI thread keeps publishing
    newer ones.
    """

    snapshotChanged = Signal(object)
    pendingChanged = Signal(bool)
    likedChanged = Signal(object)
    errorRaised = Signal(str)

    def __init__(
        self,
        *,
        client: Optional[CatalogClient] = None,
        join_key: Optional[JoinKey] = None,
        thread_pool: Optional[QThreadPool] = None,
        filter_in_thread: Optional[bool] = None,
        defer_ms: Optional[int] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._client = client or CatalogClient()
        settings = get_settings()
        if filter_in_thread is None:
            filter_in_thread = settings.filter_in_thread
        self._join_key = join_key or JoinKey(settings.join_product_field, settings.join_user_field)
        self._thread_pool = thread_pool or QThreadPool.globalInstance()

        self._store = RecordStore()
        self._selection = SelectionStore()
        self._known_ids: Set[int] = set()
        self._join_index_cache: DerivedCache[JoinIndex] = DerivedCache(
            build_join_index, name="join_index"
        )
        self._joined_cache: DerivedCache[Tuple[JoinedRecord, ...]] = DerivedCache(
            join_records, name="joined_records"
        )

        self.list_model = ProductListModel(self)
        self.thumbnails = ThumbnailCache(self._client, self._thread_pool, parent=self)

        self.scheduler = DeferredQueryScheduler(
            self.joined_records,
            delay_ms=defer_ms,
            thread_pool=self._thread_pool if filter_in_thread else None,
            parent=self,
        )
        self.scheduler.filteredViewChanged.connect(self.list_model.set_records)
        self.scheduler.pendingChanged.connect(self.pendingChanged)

        self._load_token = 0
        self._loader_signals = CatalogLoaderSignals(self)
        self._loader_signals.loaded.connect(self._on_catalog_loaded)
        self._loader_signals.error.connect(self._on_catalog_error)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    def snapshot(self) -> CatalogSnapshot:
        return self._store.snapshot

    def load(self) -> int:
        """Start fetching the catalogue in the background and return the load token."""

        self._load_token += 1
        token = self._load_token
        self.snapshotChanged.emit(self._store.mark_loading())
        worker = CatalogLoaderWorker(self._client, token, self._loader_signals)
        self._thread_pool.start(worker)
        logger.info("Loading catalog from %s (token %d)", self._client.base_url, token)
        return token

    def apply_catalog(
        self,
        products: Optional[Iterable[Product]] = None,
        users: Optional[Iterable[User]] = None,
    ) -> CatalogSnapshot:
        """Publish new collections and schedule a recompute of the filtered view.

        Passing ``None`` for either collection keeps the current one, which
        also keeps the cached join index when only products change.
        """

        snapshot = self._store.publish(products, users)
        self._known_ids.update(product.id for product in snapshot.products)
        self.snapshotChanged.emit(snapshot)
        self.scheduler.request_recompute()
        return snapshot

    def joined_records(self) -> Tuple[JoinedRecord, ...]:
        """Return the joined collection, or an empty tuple while data is unavailable."""

        snapshot = self._store.snapshot
        if not snapshot.is_available:
            return ()
        index = self._join_index_cache.get(snapshot.users, key=self._join_key)
        return self._joined_cache.get(snapshot.products, index, key=self._join_key)

    # ------------------------------------------------------------------
    # Query & selection
    # ------------------------------------------------------------------
    def set_query(self, text: str) -> None:
        self.scheduler.on_query_input(text)

    def liked(self) -> FrozenSet[int]:
        return self._selection.liked

    def is_liked(self, product_id: int) -> bool:
        return self._selection.is_liked(product_id)

    def toggle_like(self, product_id: int) -> FrozenSet[int]:
        """Flip *product_id* in the liked set; unknown ids are ignored."""

        if product_id not in self._known_ids:
            logger.warning("Ignoring like toggle for unknown product %s", product_id)
            return self._selection.liked
        liked = self._selection.toggle(product_id)
        self.list_model.set_liked(liked)
        self.likedChanged.emit(liked)
        return liked

    def shutdown(self) -> None:
        """Drop pending filter work and any in-flight catalogue load."""

        self.scheduler.cancel()
        self._load_token += 1

    # ------------------------------------------------------------------
    # Loader callbacks
    # ------------------------------------------------------------------
    @Slot(int, object)
    def _on_catalog_loaded(self, token: int, payload: CatalogPayload) -> None:
        if token != self._load_token:
            logger.debug("Discarding stale catalog load %d (current %d)", token, self._load_token)
            return
        self.apply_catalog(payload.products, payload.users)

    @Slot(int, str)
    def _on_catalog_error(self, token: int, message: str) -> None:
        if token != self._load_token:
            return
        snapshot = self._store.fail(message)
        self.scheduler.request_recompute()
        self.snapshotChanged.emit(snapshot)
        self.errorRaised.emit(message)


__all__ = ["CatalogFacade"]
