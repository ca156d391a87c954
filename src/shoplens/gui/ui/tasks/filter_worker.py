"""Worker that recomputes the filtered view off the GUI thread."""

from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QObject, QRunnable, Signal

from ....core.filter_engine import filter_records
from ....models import JoinedRecord

logger = logging.getLogger(__name__)


class FilterSignals(QObject):
    """Signals emitted by :class:`FilterWorker`."""

    finished = Signal(int, str, object)
    """Emitted with the generation, the query and the filtered tuple."""

    error = Signal(int, str)


class FilterWorker(QRunnable):
    """Run :func:`filter_records` for one scheduler generation.

    The worker captures the record snapshot at construction time; the
    scheduler decides on delivery whether the result is still current.
    """

    def __init__(
        self,
        records: Sequence[JoinedRecord],
        query: str,
        generation: int,
        signals: FilterSignals,
    ) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._records = records
        self._query = query
        self._generation = generation
        self._signals = signals

    def run(self) -> None:  # type: ignore[override]
        try:
            view = filter_records(self._records, self._query)
        except Exception as exc:  # pragma: no cover - filter_records is total over valid records
            logger.exception("Filter recompute for generation %d failed", self._generation)
            self._signals.error.emit(self._generation, str(exc))
            return
        self._signals.finished.emit(self._generation, self._query, view)


__all__ = ["FilterSignals", "FilterWorker"]
