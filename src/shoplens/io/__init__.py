"""Network access to the catalogue API."""

from .catalog_client import CatalogClient, CatalogPayload

__all__ = ["CatalogClient", "CatalogPayload"]
