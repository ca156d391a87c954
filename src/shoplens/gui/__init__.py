"""PySide6 front end: scheduler, facade and widgets."""
