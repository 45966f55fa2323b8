import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from multispinbox.model import IntegerSection, MultiSectionModel


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def model():
    return MultiSectionModel()


@pytest.fixture
def clock_model():
    """'[' prefix, two 2-digit sections separated by ':' -> '[00:00'."""
    m = MultiSectionModel()
    m.set_prefix("[")
    m.insert_section(0, IntegerSection(0, 99, width=2), ":")
    m.insert_section(1, IntegerSection(0, 99, width=2))
    return m


class Recorder:
    """Collects signal emissions."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)


@pytest.fixture
def recorder():
    return Recorder
