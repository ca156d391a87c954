import pytest

from shoplens.core.filter_engine import filter_records, normalize_query, record_matches
from shoplens.core.join_index import build_join_index, join_records
from shoplens.models import JoinedRecord, Product, User


@pytest.fixture
def joined(catalog):
    products, users = catalog
    return join_records(products, build_join_index(users))


def _is_subsequence(subset, full) -> bool:
    iterator = iter(full)
    return all(any(item is candidate for candidate in iterator) for item in subset)


def test_normalize_query_trims_and_lowercases() -> None:
    assert normalize_query("  ReD  ") == "red"
    assert normalize_query("   ") == ""
    assert normalize_query(None) == ""


def test_empty_query_returns_everything_in_order(joined) -> None:
    assert filter_records(joined, "") == joined
    assert filter_records(joined, "   ") == joined


@pytest.mark.parametrize("query", ["e", "shirt", "LEE", "o", "zzz", "lamp", " de"])
def test_result_is_an_ordered_subsequence(joined, query) -> None:
    result = filter_records(joined, query)

    assert _is_subsequence(result, joined)


def test_matching_is_case_insensitive(joined) -> None:
    assert filter_records(joined, "ABC") == filter_records(joined, "abc")
    assert filter_records(joined, "RED") == filter_records(joined, "red")


def test_matches_title_description_and_user_names(joined) -> None:
    assert [r.product.id for r in filter_records(joined, "shirt")] == [1]
    assert [r.product.id for r in filter_records(joined, "denim")] == [2]
    assert [r.product.id for r in filter_records(joined, "stone")] == [2]
    assert [r.product.id for r in filter_records(joined, "ann")] == [1]


def test_users_not_attached_are_never_searched(joined) -> None:
    # "Zed Nobody" exists but has no product with id 9.
    assert filter_records(joined, "nobody") == ()


def test_records_without_user_match_on_product_fields() -> None:
    record = JoinedRecord(Product(5, "Desk", description="Oak desk"), None)

    assert record_matches(record, "oak")
    assert not record_matches(record, "ann")


def test_red_shirt_scenario() -> None:
    products = [Product(1, "Red Shirt")]
    users = [User(1, "Ann", "Lee")]
    joined = join_records(products, build_join_index(users))

    result = filter_records(joined, "ann")

    assert len(result) == 1
    assert result[0].user == User(1, "Ann", "Lee")
    assert filter_records(joined, "blue") == ()


def test_filter_is_deterministic(joined) -> None:
    assert filter_records(joined, "e") == filter_records(joined, "e")
