"""Viewport geometry and row-slot recycling for the windowed product list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import AbstractSet, Callable, Generic, List, Optional, Protocol, Sequence, TypeVar

from ..models import JoinedRecord


@dataclass(frozen=True)
class ViewportWindow:
    """Inclusive range of realised row indices for one scroll position.

    ``first`` and ``last`` already include the overscan rows.  An empty list
    produces ``first = 0`` and ``last = -1`` so that :attr:`indices` is empty.
    """

    first: int
    last: int
    row_height: int
    scroll_offset: int
    viewport_height: int
    count: int

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def indices(self) -> range:
        return range(self.first, self.last + 1)

    @property
    def size(self) -> int:
        return max(0, self.last - self.first + 1)

    @property
    def total_height(self) -> int:
        return self.count * self.row_height

    def row_top(self, index: int) -> int:
        """Content-space y coordinate of row *index*."""

        return index * self.row_height


def max_scroll_offset(count: int, row_height: int, viewport_height: int) -> int:
    return max(0, count * row_height - viewport_height)


def compute_window(
    count: int,
    row_height: int,
    viewport_height: int,
    scroll_offset: int,
    overscan: int = 1,
) -> Optional[ViewportWindow]:
    """Return the rows intersecting the viewport, or ``None`` while unmeasured.

    ``None`` signals that either dimension is not yet known (zero or
    negative), in which case no rows may be computed at all.
    """

    if row_height <= 0 or viewport_height <= 0:
        return None

    offset = min(max(0, int(scroll_offset)), max_scroll_offset(count, row_height, viewport_height))
    if count <= 0:
        return ViewportWindow(0, -1, row_height, offset, viewport_height, 0)

    overscan = max(0, overscan)
    first = math.floor(offset / row_height) - overscan
    last = math.ceil((offset + viewport_height) / row_height) + overscan
    first = max(0, min(first, count - 1))
    last = max(first, min(last, count - 1))
    return ViewportWindow(first, last, row_height, offset, viewport_height, count)


def slot_capacity(row_height: int, viewport_height: int, overscan: int = 1) -> int:
    """Upper bound on rows a window of this viewport can realise, independent of length."""

    if row_height <= 0 or viewport_height <= 0:
        return 0
    return math.ceil(viewport_height / row_height) + 2 + 2 * max(0, overscan)


class RowSlot(Protocol):
    """Interface the arena expects from a reusable row."""

    def bind(self, index: int, record: JoinedRecord, liked: bool) -> None: ...

    def release(self) -> None: ...


S = TypeVar("S", bound=RowSlot)


class RowSlotArena(Generic[S]):
    """Pool of row slots addressed by viewport position.

    Row *i* always lands in slot ``i % capacity``.  Consecutive indices inside
    a window therefore never collide, and sliding the window by one row only
    rebinds the slot that scrolled out.  Slots are rebound on every layout
    with the record's own liked state so nothing from a previous binding can
    leak into the next one.
    """

    def __init__(self, factory: Callable[[], S]) -> None:
        self._factory = factory
        self._slots: List[S] = []
        self._bound: List[Optional[int]] = []

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def slots(self) -> Sequence[S]:
        return tuple(self._slots)

    def bound_indices(self) -> List[int]:
        return sorted(index for index in self._bound if index is not None)

    def slot_for(self, index: int) -> Optional[S]:
        """Return the slot currently showing row *index*, if realised."""

        if not self._slots:
            return None
        position = index % len(self._slots)
        if self._bound[position] != index:
            return None
        return self._slots[position]

    def ensure_capacity(self, needed: int) -> None:
        if needed <= len(self._slots):
            return
        # Growing changes the modulo mapping, so current bindings are dropped.
        self.release_all()
        while len(self._slots) < needed:
            self._slots.append(self._factory())
            self._bound.append(None)

    def layout(
        self,
        window: ViewportWindow,
        records: Sequence[JoinedRecord],
        liked: AbstractSet[int],
    ) -> List[S]:
        """Bind every index in *window* and release the rest; return the bound slots."""

        if window.is_empty:
            self.release_all()
            return []

        self.ensure_capacity(window.size)
        capacity = len(self._slots)
        wanted = {index % capacity: index for index in window.indices}
        active: List[S] = []
        for position, slot in enumerate(self._slots):
            index = wanted.get(position)
            if index is None:
                if self._bound[position] is not None:
                    slot.release()
                    self._bound[position] = None
                continue
            record = records[index]
            slot.bind(index, record, record.product_id in liked)
            self._bound[position] = index
            active.append(slot)
        return active

    def release_all(self) -> None:
        for position, slot in enumerate(self._slots):
            if self._bound[position] is not None:
                slot.release()
                self._bound[position] = None


__all__ = [
    "RowSlot",
    "RowSlotArena",
    "ViewportWindow",
    "compute_window",
    "max_scroll_offset",
    "slot_capacity",
]
