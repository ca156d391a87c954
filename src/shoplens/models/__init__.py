"""Domain records shared by the core pipeline and the GUI."""

from .records import JoinedRecord, Product, User

__all__ = ["JoinedRecord", "Product", "User"]
