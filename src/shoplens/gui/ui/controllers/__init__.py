"""Controllers coordinating widgets with the catalogue facade."""

from .catalog_controller import CatalogController

__all__ = ["CatalogController"]
