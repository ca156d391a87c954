import os

import pytest

# Qt must pick the headless platform before pytest-qt creates the QApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from shoplens.config import get_settings
from shoplens.models import JoinedRecord, Product, User


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read ``SHOPLENS_*`` overrides for every test."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _product(product_id: int, title: str, description: str = "", **extra) -> Product:
    return Product(
        id=product_id,
        title=title,
        category=extra.get("category", "misc"),
        price=extra.get("price", 9.99),
        description=description,
        images=tuple(extra.get("images", ())),
    )


@pytest.fixture
def make_product():
    return _product


@pytest.fixture
def make_records():
    """Return a factory producing *n* joined records with predictable titles."""

    def factory(count: int, *, with_users: bool = False):
        records = []
        for index in range(count):
            product = _product(index + 1, f"Item {index + 1}", f"Description {index + 1}")
            user = User(index + 1, f"First{index + 1}", f"Last{index + 1}") if with_users else None
            records.append(JoinedRecord(product, user))
        return tuple(records)

    return factory


@pytest.fixture
def catalog():
    """A small mixed catalogue: some products have a matching user, some do not."""

    products = (
        _product(1, "Red Shirt", "Cotton shirt in bright red"),
        _product(2, "Blue Jeans", "Denim trousers"),
        _product(3, "Green Lamp", "Desk lamp with LED"),
        _product(4, "Essence Mascara", "Lengthening mascara"),
    )
    users = (
        User(1, "Ann", "Lee"),
        User(2, "Bob", "Stone"),
        User(9, "Zed", "Nobody"),
    )
    return products, users
