"""Single-entry caches for values derived from immutable snapshots."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


class DerivedCache(Generic[T]):
    """Remember the last result of *compute* and reuse it while inputs are unchanged.

    Positional inputs are snapshots and are compared by identity: a new tuple
    of products invalidates the cache even when it is value-equal, while the
    same tuple reused across renders never triggers a recompute.  Keyword
    parameters are small values (query strings, join keys) compared by
    equality.
    """

    def __init__(self, compute: Callable[..., T], *, name: str = "") -> None:
        self._compute = compute
        self._name = name or getattr(compute, "__name__", "derived")
        self._inputs: Tuple[Any, ...] = ()
        self._params: Dict[str, Any] = {}
        self._value: Any = _MISSING
        self.hits = 0
        self.misses = 0

    @property
    def name(self) -> str:
        return self._name

    def get(self, *inputs: Any, **params: Any) -> T:
        if self._is_fresh(inputs, params):
            self.hits += 1
            return self._value
        value = self._compute(*inputs, **params)
        self._inputs = inputs
        self._params = dict(params)
        self._value = value
        self.misses += 1
        return value

    def peek(self) -> Optional[T]:
        """Return the cached value without computing, or ``None`` if empty."""

        return None if self._value is _MISSING else self._value

    def invalidate(self) -> None:
        self._inputs = ()
        self._params = {}
        self._value = _MISSING

    def _is_fresh(self, inputs: Tuple[Any, ...], params: Dict[str, Any]) -> bool:
        if self._value is _MISSING:
            return False
        if len(inputs) != len(self._inputs):
            return False
        if any(new is not old for new, old in zip(inputs, self._inputs)):
            return False
        return params == self._params


__all__ = ["DerivedCache"]
