"""Background worker helpers for GUI tasks."""

from .catalog_loader_worker import CatalogLoaderSignals, CatalogLoaderWorker
from .filter_worker import FilterSignals, FilterWorker
from .thumbnail_loader_worker import ThumbnailLoaderSignals, ThumbnailLoaderWorker

__all__ = [
    "CatalogLoaderSignals",
    "CatalogLoaderWorker",
    "FilterSignals",
    "FilterWorker",
    "ThumbnailLoaderSignals",
    "ThumbnailLoaderWorker",
]
