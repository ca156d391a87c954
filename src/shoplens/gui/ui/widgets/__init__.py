"""Widgets composing the catalogue window."""

from .catalog_page import CatalogPage, PageState
from .product_row import ProductRowWidget
from .search_bar import SearchBar
from .windowed_list import RendererState, WindowedListView

__all__ = [
    "CatalogPage",
    "PageState",
    "ProductRowWidget",
    "RendererState",
    "SearchBar",
    "WindowedListView",
]
