"""ShopLens: incremental catalogue search with a windowed product list."""

__version__ = "0.1.0"
