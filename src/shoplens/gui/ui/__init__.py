"""Qt user interface for ShopLens."""
