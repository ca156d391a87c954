from shoplens.core.record_store import LoadStatus, RecordStore


def test_store_starts_loading_and_unavailable() -> None:
    store = RecordStore()

    assert store.snapshot.status is LoadStatus.LOADING
    assert not store.snapshot.is_available
    assert store.snapshot.products == ()


def test_publish_bumps_version_and_keeps_untouched_collections(catalog) -> None:
    products, users = catalog
    store = RecordStore()
    first = store.publish(products, users)

    second = store.publish(products=products[:2])

    assert first.is_available
    assert second.version == first.version + 1
    assert second.users is first.users
    assert len(second.products) == 2


def test_fail_clears_collections_and_records_message(catalog) -> None:
    products, users = catalog
    store = RecordStore()
    store.publish(products, users)

    snapshot = store.fail("HTTP 500/200")

    assert snapshot.status is LoadStatus.ERROR
    assert snapshot.error == "HTTP 500/200"
    assert snapshot.products == ()
    assert not snapshot.is_available


def test_mark_loading_keeps_previous_data(catalog) -> None:
    products, users = catalog
    store = RecordStore()
    ready = store.publish(products, users)

    loading = store.mark_loading()

    assert loading.status is LoadStatus.LOADING
    assert loading.products is ready.products
