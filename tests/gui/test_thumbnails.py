import httpx
import pytest
from PySide6.QtCore import QBuffer, QIODevice, QThreadPool, Qt
from PySide6.QtGui import QImage, QPixmap

from shoplens.gui.thumbnails import ThumbnailCache
from shoplens.gui.ui.widgets import ProductRowWidget
from shoplens.io.catalog_client import CatalogClient
from shoplens.models import JoinedRecord


def _png_bytes(width: int = 200, height: int = 100) -> bytes:
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.red)
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    return bytes(buffer.data())


class ImageServer:
    """Serve a PNG for every ``/ok`` path and 404 for anything else."""

    def __init__(self) -> None:
        self.requests: list[str] = []
        self.png = _png_bytes()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        if request.url.path.startswith("/ok"):
            return httpx.Response(200, content=self.png)
        return httpx.Response(404)


@pytest.fixture
def server():
    return ImageServer()


@pytest.fixture
def pool():
    thread_pool = QThreadPool()
    yield thread_pool
    thread_pool.waitForDone()


@pytest.fixture
def cache(qtbot, server, pool):
    client = CatalogClient("https://api.example", transport=httpx.MockTransport(server))
    return ThumbnailCache(client, pool, size=96, capacity=2, enabled=True)


def test_thumbnails_download_once_and_fit_the_box(qtbot, cache, server) -> None:
    url = "https://cdn.example/ok/1.png"

    with qtbot.waitSignal(cache.thumbnailReady, timeout=5000) as blocker:
        assert cache.request(url) is None
        assert cache.request(url) is None

    ready_url, pixmap = blocker.args
    assert ready_url == url
    assert (pixmap.width(), pixmap.height()) == (96, 48)
    assert cache.request(url) is pixmap
    assert server.requests == [url]


def test_least_recently_used_thumbnail_is_evicted(qtbot, cache) -> None:
    urls = [f"https://cdn.example/ok/{index}.png" for index in range(3)]
    for url in urls:
        with qtbot.waitSignal(cache.thumbnailReady, timeout=5000):
            cache.request(url)

    assert len(cache) == 2
    assert cache.cached(urls[0]) is None
    assert cache.cached(urls[2]) is not None


def test_failed_downloads_are_not_retried(qtbot, cache, server) -> None:
    url = "https://cdn.example/gone.png"

    with qtbot.waitSignal(cache.thumbnailFailed, timeout=5000) as blocker:
        cache.request(url)

    assert blocker.args == [url]
    assert cache.request(url) is None
    assert not cache.is_loading(url)
    assert server.requests == [url]


def test_disabled_cache_never_fetches(qtbot, server, pool) -> None:
    client = CatalogClient("https://api.example", transport=httpx.MockTransport(server))
    cache = ThumbnailCache(client, pool, enabled=False)

    assert cache.request("https://cdn.example/ok/1.png") is None
    assert server.requests == []


def test_row_shows_thumbnails_for_its_record(qtbot, cache, make_product) -> None:
    row = ProductRowWidget()
    qtbot.addWidget(row)
    row.set_thumbnail_source(cache)
    product = make_product(1, "Lamp", images=["https://cdn.example/ok/a.png"])

    with qtbot.waitSignal(cache.thumbnailReady, timeout=5000):
        row.bind(0, JoinedRecord(product), False)

    assert row.has_thumbnail(0)
    assert not row.thumbnail_labels[0].isHidden()
    assert row.thumbnail_labels[1].isHidden()


def test_late_thumbnail_for_previous_binding_is_dropped(qtbot, make_product) -> None:
    client = CatalogClient(
        "https://api.example",
        transport=httpx.MockTransport(lambda request: httpx.Response(404)),
    )
    pool = QThreadPool()
    cache = ThumbnailCache(client, pool, enabled=False)
    row = ProductRowWidget()
    qtbot.addWidget(row)
    row.set_thumbnail_source(cache)
    first = make_product(1, "Lamp", images=["https://cdn.example/a.png"])
    second = make_product(2, "Chair", images=["https://cdn.example/b.png"])

    row.bind(0, JoinedRecord(first), False)
    row.bind(0, JoinedRecord(second), False)
    pixmap = QPixmap(10, 10)
    cache.thumbnailReady.emit("https://cdn.example/a.png", pixmap)

    assert row.thumbnail_urls() == ("https://cdn.example/b.png",)
    assert not row.has_thumbnail(0)

    cache.thumbnailReady.emit("https://cdn.example/b.png", pixmap)
    assert row.has_thumbnail(0)
