"""Liked-product bookkeeping with value semantics."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, Iterable


def toggle_liked(liked: AbstractSet[int], product_id: int) -> FrozenSet[int]:
    """Return a new set with *product_id* flipped; *liked* is left untouched."""

    if product_id in liked:
        return frozenset(item for item in liked if item != product_id)
    return frozenset(liked) | {product_id}


class SelectionStore:
    """Hold the currently published liked set.

    Every :meth:`toggle` publishes a fresh ``frozenset`` so rows that were bound
    against an older snapshot keep seeing consistent data until they are
    rebound.
    """

    def __init__(self, initial: Iterable[int] = ()) -> None:
        self._liked: FrozenSet[int] = frozenset(initial)

    @property
    def liked(self) -> FrozenSet[int]:
        return self._liked

    def toggle(self, product_id: int) -> FrozenSet[int]:
        self._liked = toggle_liked(self._liked, product_id)
        return self._liked

    def is_liked(self, product_id: int) -> bool:
        return product_id in self._liked

    def __len__(self) -> int:
        return len(self._liked)


__all__ = ["SelectionStore", "toggle_liked"]
