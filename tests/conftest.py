import os

# Headless Qt for widget tests; must be set before any Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("PYQTGRAPH_QT_LIB", "PySide6")

import pytest

from degeneracycollapse.model.field import Domain, Grid


@pytest.fixture
def domain() -> Domain:
    return Domain()


@pytest.fixture
def small_grid() -> Grid:
    return Grid(100, 100)
