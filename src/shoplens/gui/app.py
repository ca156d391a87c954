"""Application bootstrap for the ShopLens desktop browser."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..config import get_settings
from ..errors import ConfigError

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create the Qt application, show the window and start the catalogue load."""

    args = list(sys.argv if argv is None else argv)
    # A bad ``SHOPLENS_*`` override surfaces here instead of as a traceback.
    try:
        get_settings()
        from ..utils.logging import get_logger
        from .main_window import MainWindow
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    get_logger()
    app = QApplication.instance() or QApplication(args)
    app.setApplicationName("ShopLens")
    window = MainWindow()
    window.show()
    window.facade.load()
    return app.exec()


__all__ = ["main"]
