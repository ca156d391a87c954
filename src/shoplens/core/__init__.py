"""Qt-free pipeline: join, filter, selection and windowing."""

from .filter_engine import filter_records, normalize_query, record_matches
from .join_index import DEFAULT_JOIN_KEY, JoinIndex, JoinKey, build_join_index, join_records
from .memo import DerivedCache
from .record_store import CatalogSnapshot, LoadStatus, RecordStore
from .selection import SelectionStore, toggle_liked
from .windowing import RowSlotArena, ViewportWindow, compute_window, slot_capacity

__all__ = [
    "CatalogSnapshot",
    "DEFAULT_JOIN_KEY",
    "DerivedCache",
    "JoinIndex",
    "JoinKey",
    "LoadStatus",
    "RecordStore",
    "RowSlotArena",
    "SelectionStore",
    "ViewportWindow",
    "build_join_index",
    "compute_window",
    "filter_records",
    "join_records",
    "normalize_query",
    "record_matches",
    "slot_capacity",
    "toggle_liked",
]
