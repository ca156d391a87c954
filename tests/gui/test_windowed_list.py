import math

import pytest

from shoplens.gui.ui.models import ProductListModel
from shoplens.gui.ui.widgets import RendererState, WindowedListView

ROW_HEIGHT = 100


@pytest.fixture
def view(qtbot):
    widget = WindowedListView(row_height=ROW_HEIGHT, overscan=1)
    qtbot.addWidget(widget)
    widget.resize(400, 600)
    return widget


def _show(qtbot, widget) -> None:
    widget.show()
    qtbot.waitExposed(widget)


def _bound(widget) -> int:
    return math.ceil(widget.viewport().height() / ROW_HEIGHT) + 2 + 2


def test_hidden_view_stays_measuring(view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(500))
    view.set_model(model)

    assert view.state() is RendererState.MEASURING
    assert view.realized_rows() == []


def test_five_hundred_rows_realise_a_bounded_window(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(500))
    view.set_model(model)
    _show(qtbot, view)

    assert view.viewport().height() == 600
    assert view.state() is RendererState.READY
    rows = view.realized_rows()
    assert rows[0] == 0
    assert len(rows) <= 10
    assert view.verticalScrollBar().maximum() == 500 * ROW_HEIGHT - 600


def test_scrolling_moves_the_window(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(500))
    view.set_model(model)
    _show(qtbot, view)

    view.scroll_to_offset(25_000)

    rows = view.realized_rows()
    assert rows[0] == 249
    assert 255 in rows
    assert len(rows) <= _bound(view)
    widget = view.row_widget(250)
    assert widget.title_label.text() == "Item 251"
    assert widget.geometry().top() == 0


@pytest.mark.parametrize("count", [10, 10_000])
def test_realised_rows_do_not_grow_with_the_list(qtbot, view, make_records, count) -> None:
    model = ProductListModel()
    model.set_records(make_records(count))
    view.set_model(model)
    _show(qtbot, view)

    for offset in (0, 350, 999_999):
        view.scroll_to_offset(offset)
        assert len(view.realized_rows()) <= min(count, _bound(view))
        assert view.slot_count() <= _bound(view)


def test_empty_model_shows_the_empty_state(qtbot, view) -> None:
    model = ProductListModel()
    view.set_model(model)
    _show(qtbot, view)

    assert view.state() is RendererState.READY
    assert view.is_empty_state_visible()
    assert view.realized_rows() == []


def test_recycled_rows_reflect_liked_state(qtbot, view, make_records) -> None:
    model = ProductListModel()
    records = make_records(500)
    model.set_records(records)
    model.set_liked({1})
    view.set_model(model)
    _show(qtbot, view)

    assert view.row_widget(0).is_liked()
    assert not view.row_widget(1).is_liked()

    for offset in (4_000, 12_345, 0, 7_700):
        view.scroll_to_offset(offset)
        for index in view.realized_rows():
            row = view.row_widget(index)
            assert row.bound_product_id() == records[index].product_id
            assert row.is_liked() == (records[index].product_id == 1)


def test_like_toggle_updates_visible_row(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(20))
    view.set_model(model)
    _show(qtbot, view)

    model.set_liked({3})

    assert view.row_widget(2).is_liked()
    assert view.row_widget(2).like_button.text() == "Unlike"


def test_row_click_reports_the_bound_product(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(500))
    view.set_model(model)
    _show(qtbot, view)
    view.scroll_to_offset(30_000)

    with qtbot.waitSignal(view.likeToggled) as blocker:
        view.row_widget(301).like_button.click()

    assert blocker.args == [302]


def test_zero_height_returns_to_measuring(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(50))
    view.set_model(model)
    _show(qtbot, view)

    view.resize(400, 0)

    assert view.state() is RendererState.MEASURING
    assert view.realized_rows() == []

    view.resize(400, 300)
    assert view.state() is RendererState.READY
    assert view.realized_rows()


def test_hiding_releases_rows(qtbot, view, make_records) -> None:
    model = ProductListModel()
    model.set_records(make_records(50))
    view.set_model(model)
    _show(qtbot, view)

    view.hide()

    assert view.state() is RendererState.MEASURING
    assert view.realized_rows() == []
