"""Utility helpers shared across ShopLens."""
