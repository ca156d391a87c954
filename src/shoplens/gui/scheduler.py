"""Deferred, supersedable recompute of the filtered product view."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from ..config import get_settings
from ..core.filter_engine import filter_records, normalize_query
from ..core.memo import DerivedCache
from ..models import JoinedRecord
from .ui.tasks.filter_worker import FilterSignals, FilterWorker

logger = logging.getLogger(__name__)


class DeferredQueryScheduler(QObject):
    """Split the search query into a committed and an effective value.

    :meth:`on_query_input` commits the text immediately so the input box never
    lags, then schedules a single deferred unit of work that recomputes the
    filtered view.  The unit is a single-shot :class:`QTimer`; restarting it
    abandons the previous unit, and every unit carries a generation number so
    results computed on a worker thread for an older keystroke are dropped on
    arrival.  Only the newest generation ever applies.
    """

    committedQueryChanged = Signal(str)
    effectiveQueryChanged = Signal(str)
    filteredViewChanged = Signal(object)
    pendingChanged = Signal(bool)

    def __init__(
        self,
        source: Callable[[], Sequence[JoinedRecord]],
        *,
        delay_ms: Optional[int] = None,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._source = source
        self._committed = ""
        self._effective = ""
        self._view: Tuple[JoinedRecord, ...] = ()
        self._generation = 0
        self._pending = False
        self._applied = 0
        self._filter_cache: DerivedCache[Tuple[JoinedRecord, ...]] = DerivedCache(
            filter_records, name="filtered_view"
        )

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        if delay_ms is None:
            delay_ms = get_settings().defer_ms
        self._timer.setInterval(max(0, int(delay_ms)))
        self._timer.timeout.connect(self._run_scheduled_unit)

        self._thread_pool = thread_pool
        self._worker_signals = FilterSignals(self)
        self._worker_signals.finished.connect(self._on_worker_finished)
        self._worker_signals.error.connect(self._on_worker_error)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def on_query_input(self, text: str) -> None:
        """Commit *text* now and schedule the recompute for later."""

        text = text or ""
        if text != self._committed:
            self._committed = text
            self.committedQueryChanged.emit(text)
        self._schedule()

    def request_recompute(self) -> None:
        """Schedule a recompute for the committed query, e.g. after new data arrives."""

        self._schedule()

    def flush(self) -> None:
        """Run a scheduled unit immediately instead of waiting for the event loop."""

        if self._timer.isActive():
            self._timer.stop()
            self._run_scheduled_unit()

    def cancel(self) -> None:
        """Abandon scheduled and in-flight work without applying it."""

        self._timer.stop()
        self._generation += 1
        self._set_pending(False)

    def committed_query(self) -> str:
        return self._committed

    def effective_query(self) -> str:
        return self._effective

    def filtered_view(self) -> Tuple[JoinedRecord, ...]:
        return self._view

    def is_pending(self) -> bool:
        return self._pending

    def applied_count(self) -> int:
        """Number of units that replaced the effective query and view."""

        return self._applied

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _schedule(self) -> None:
        self._generation += 1
        self._set_pending(True)
        # ``start`` on an active single-shot timer restarts it, which is how a
        # newer keystroke supersedes the unit scheduled for an older one.
        self._timer.start()

    @Slot()
    def _run_scheduled_unit(self) -> None:
        generation = self._generation
        query = self._committed
        records = self._source()
        if self._thread_pool is None:
            view = self._filter_cache.get(records, query=normalize_query(query))
            self._apply(generation, query, view)
            return
        worker = FilterWorker(records, query, generation, self._worker_signals)
        self._thread_pool.start(worker)

    @Slot(int, str, object)
    def _on_worker_finished(self, generation: int, query: str, view: object) -> None:
        self._apply(generation, query, tuple(view))  # type: ignore[arg-type]

    @Slot(int, str)
    def _on_worker_error(self, generation: int, message: str) -> None:
        if generation != self._generation:
            return
        logger.error("Filter recompute failed: %s", message)
        self._set_pending(False)

    def _apply(self, generation: int, query: str, view: Tuple[JoinedRecord, ...]) -> None:
        if generation != self._generation:
            logger.debug(
                "Discarding superseded filter result for %r (generation %d, current %d)",
                query,
                generation,
                self._generation,
            )
            return
        self._view = view
        self._applied += 1
        if query != self._effective:
            self._effective = query
            self.effectiveQueryChanged.emit(query)
        self.filteredViewChanged.emit(view)
        self._set_pending(False)

    def _set_pending(self, pending: bool) -> None:
        if pending == self._pending:
            return
        self._pending = pending
        self.pendingChanged.emit(pending)


__all__ = ["DeferredQueryScheduler"]
