"""Allow ``python -m shoplens`` to launch the desktop browser."""

from __future__ import annotations

import sys

from .gui.app import main

if __name__ == "__main__":  # pragma: no cover - entry point
    sys.exit(main())
