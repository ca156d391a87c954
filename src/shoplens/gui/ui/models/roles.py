"""Custom Qt item roles exposed by :class:`ProductListModel`."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


_USER_ROLE = int(Qt.ItemDataRole.UserRole)


class Roles(IntEnum):
    PRODUCT_ID = _USER_ROLE + 1
    TITLE = _USER_ROLE + 2
    DESCRIPTION = _USER_ROLE + 3
    CATEGORY = _USER_ROLE + 4
    PRICE = _USER_ROLE + 5
    IMAGES = _USER_ROLE + 6
    USER_NAME = _USER_ROLE + 7
    LIKED = _USER_ROLE + 8


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Merge the ShopLens roles into *base* for QML-style consumers."""

    names: Dict[int, bytes] = dict(base or {})
    names.update(
        {
            Roles.PRODUCT_ID: b"productId",
            Roles.TITLE: b"title",
            Roles.DESCRIPTION: b"description",
            Roles.CATEGORY: b"category",
            Roles.PRICE: b"price",
            Roles.IMAGES: b"images",
            Roles.USER_NAME: b"userName",
            Roles.LIKED: b"liked",
        }
    )
    return names


__all__ = ["Roles", "role_names"]
