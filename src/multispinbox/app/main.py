"""
Run with: python -m multispinbox
"""
from __future__ import annotations

import sys

from multispinbox.app.application import create_app
from multispinbox.app.main_window import MainWindow
from multispinbox.logging_config import setup_logging


def main() -> int:
    """Main entry point for the demo application."""
    setup_logging()
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
