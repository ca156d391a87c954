import pytest
from PySide6.QtCore import QThreadPool

from shoplens.gui.scheduler import DeferredQueryScheduler


@pytest.fixture
def records(make_records):
    return make_records(50)


@pytest.fixture
def scheduler(qtbot, records):
    scheduler = DeferredQueryScheduler(lambda: records, delay_ms=0)
    yield scheduler
    scheduler.cancel()


def test_committed_query_updates_before_the_view(qtbot, scheduler) -> None:
    committed: list[str] = []
    scheduler.committedQueryChanged.connect(committed.append)

    scheduler.on_query_input("item 1")

    assert committed == ["item 1"]
    assert scheduler.committed_query() == "item 1"
    assert scheduler.effective_query() == ""
    assert scheduler.is_pending()
    assert scheduler.filtered_view() == ()


def test_only_the_latest_query_is_applied(qtbot, scheduler) -> None:
    pending: list[bool] = []
    applied_views: list[tuple] = []
    scheduler.pendingChanged.connect(pending.append)
    scheduler.filteredViewChanged.connect(applied_views.append)

    scheduler.on_query_input("a")
    scheduler.on_query_input("ab")
    qtbot.waitUntil(lambda: not scheduler.is_pending())

    assert scheduler.applied_count() == 1
    assert scheduler.effective_query() == "ab"
    assert applied_views == [()]
    # Pending stayed raised while the first unit was superseded.
    assert pending == [True, False]


def test_view_matches_effective_query(qtbot, scheduler) -> None:
    scheduler.on_query_input("Item 4")
    qtbot.waitUntil(lambda: not scheduler.is_pending())

    titles = [record.product.title for record in scheduler.filtered_view()]
    assert titles == ["Item 4", "Item 40", "Item 41", "Item 42", "Item 43",
                      "Item 44", "Item 45", "Item 46", "Item 47", "Item 48", "Item 49"]


def test_blank_query_returns_every_record(qtbot, scheduler, records) -> None:
    scheduler.on_query_input("   ")
    scheduler.flush()

    assert scheduler.filtered_view() == records
    assert scheduler.effective_query() == "   "


def test_flush_applies_synchronously(scheduler) -> None:
    scheduler.on_query_input("Item 7")
    scheduler.flush()

    assert not scheduler.is_pending()
    assert scheduler.applied_count() == 1
    assert [r.product_id for r in scheduler.filtered_view()] == [7]


def test_cancel_drops_the_scheduled_unit(qtbot, scheduler) -> None:
    scheduler.on_query_input("Item 7")
    scheduler.cancel()
    qtbot.wait(20)

    assert not scheduler.is_pending()
    assert scheduler.applied_count() == 0
    assert scheduler.effective_query() == ""


def test_repeated_query_reuses_cached_view(scheduler) -> None:
    scheduler.on_query_input("Item 1")
    scheduler.flush()
    first = scheduler.filtered_view()

    scheduler.request_recompute()
    scheduler.flush()

    assert scheduler.filtered_view() is first
    assert scheduler.applied_count() == 2


def test_new_source_snapshot_is_picked_up(qtbot, make_records) -> None:
    current = {"records": make_records(3)}
    scheduler = DeferredQueryScheduler(lambda: current["records"], delay_ms=0)

    scheduler.request_recompute()
    scheduler.flush()
    assert len(scheduler.filtered_view()) == 3

    current["records"] = make_records(5)
    scheduler.request_recompute()
    scheduler.flush()
    assert len(scheduler.filtered_view()) == 5


def test_thread_pool_results_for_old_generations_are_discarded(qtbot, records) -> None:
    pool = QThreadPool()
    scheduler = DeferredQueryScheduler(lambda: records, delay_ms=0, thread_pool=pool)
    effective: list[str] = []
    scheduler.effectiveQueryChanged.connect(effective.append)

    scheduler.on_query_input("Item 1")
    scheduler.flush()  # worker for the first generation is now in flight
    scheduler.on_query_input("Item 2")

    qtbot.waitUntil(lambda: not scheduler.is_pending(), timeout=5000)
    pool.waitForDone()
    qtbot.wait(20)

    assert effective == ["Item 2"]
    assert scheduler.applied_count() == 1
    assert all("2" in record.product.title for record in scheduler.filtered_view())
