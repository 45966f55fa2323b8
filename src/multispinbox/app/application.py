from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys

APP_ID = "multispinbox-demo"
VISIBLE_APP_NAME = "MultiSpinBox Demo"


def create_app() -> QApplication:
    """Create and configure the QApplication instance (reuses a running one)."""
    app = QApplication.instance()
    if app is None:
        QCoreApplication.setApplicationName(APP_ID)
        app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
