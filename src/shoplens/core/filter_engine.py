"""Free-text filtering of joined catalogue records."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..models import JoinedRecord


def normalize_query(query: str | None) -> str:
    """Return the needle used for matching: trimmed and lower-cased."""

    if not query:
        return ""
    return query.strip().lower()


def record_matches(record: JoinedRecord, needle: str) -> bool:
    """Return ``True`` when *needle* (already normalised) occurs in *record*.

    Product title and description are always checked; the user's first and
    last name only when a user is attached.
    """

    product = record.product
    if needle in product.title.lower() or needle in product.description.lower():
        return True
    user = record.user
    if user is None:
        return False
    return needle in user.first_name.lower() or needle in user.last_name.lower()


def filter_records(records: Sequence[JoinedRecord], query: str | None) -> Tuple[JoinedRecord, ...]:
    """Return the records matching *query* in their original order.

    An empty or whitespace-only query matches everything.
    """

    needle = normalize_query(query)
    if not needle:
        return tuple(records)
    return tuple(record for record in records if record_matches(record, needle))


__all__ = ["filter_records", "normalize_query", "record_matches"]
