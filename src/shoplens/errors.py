"""Exception hierarchy for ShopLens."""

from __future__ import annotations


class ShopLensError(Exception):
    """Base class for every error raised by ShopLens."""


class CatalogFetchError(ShopLensError):
    """The catalogue endpoints could not be reached or answered with an error."""


class CatalogPayloadError(ShopLensError):
    """A catalogue response did not have the expected shape."""


class ConfigError(ShopLensError):
    """An environment override could not be interpreted."""


__all__ = [
    "ShopLensError",
    "CatalogFetchError",
    "CatalogPayloadError",
    "ConfigError",
]
