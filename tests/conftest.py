"""pytest configuration and fixtures for pyqt-declarative tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_theme():
    """Restore the default theme after every test."""
    yield
    from pyqt_declarative.theming import Theme
    Theme.reset()
