"""Expose Qt models used by the GUI."""

from .product_list_model import ProductListModel
from .roles import Roles, role_names

__all__ = ["ProductListModel", "Roles", "role_names"]
