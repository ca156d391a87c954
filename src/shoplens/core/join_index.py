"""Attach users to products through an explicit join key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from ..models import JoinedRecord, Product, User


@dataclass(frozen=True)
class JoinKey:
    """Names the product and user attributes whose values must be equal.

    The catalogue API offers no real relationship between products and users;
    the default ``id``/``id`` pairing mirrors the coincidental overlap of the
    two id spaces and can be replaced through configuration.
    """

    product_field: str = "id"
    user_field: str = "id"

    def for_product(self, product: Product) -> Optional[Hashable]:
        return getattr(product, self.product_field, None)

    def for_user(self, user: User) -> Optional[Hashable]:
        return getattr(user, self.user_field, None)


DEFAULT_JOIN_KEY = JoinKey()


class JoinIndex(Mapping[Hashable, User]):
    """Read-only mapping from join key to :class:`User`."""

    __slots__ = ("_users",)

    def __init__(self, users: Dict[Hashable, User]) -> None:
        self._users = users

    def __getitem__(self, key: Hashable) -> User:
        return self._users[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def lookup(self, key: Optional[Hashable]) -> Optional[User]:
        """Return the user for *key*, or ``None`` when nobody matches."""

        if key is None:
            return None
        return self._users.get(key)


def build_join_index(users: Iterable[User], key: JoinKey = DEFAULT_JOIN_KEY) -> JoinIndex:
    """Index *users* by ``key.user_field``; later duplicates replace earlier ones."""

    mapping: Dict[Hashable, User] = {}
    for user in users:
        value = key.for_user(user)
        if value is not None:
            mapping[value] = user
    return JoinIndex(mapping)


def join_records(
    products: Sequence[Product],
    index: JoinIndex,
    key: JoinKey = DEFAULT_JOIN_KEY,
) -> Tuple[JoinedRecord, ...]:
    """Pair every product with its user, preserving product order."""

    return tuple(
        JoinedRecord(product=product, user=index.lookup(key.for_product(product)))
        for product in products
    )


__all__ = ["DEFAULT_JOIN_KEY", "JoinIndex", "JoinKey", "build_join_index", "join_records"]
